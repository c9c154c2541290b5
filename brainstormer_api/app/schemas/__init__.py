"""
Pydantic schema definitions for API payloads.

Request schemas accept missing values on purpose: the explicit
validator in ``services.validation`` decides what is acceptable so the
same rules apply whatever transport delivers the request.  Response
schemas are projections of the domain records.  All schemas use
camelCase names on the wire.
"""
