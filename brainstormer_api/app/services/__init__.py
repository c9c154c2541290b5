"""
Service layer.

``validation`` checks raw requests against declarative rules,
``session_service`` implements the session and idea use cases and
``mapping`` turns domain records into response views.
"""
