"""
Domain records.

These dataclasses are what the repository stores.  They never cross
the API boundary directly; ``services.mapping`` projects them onto the
Pydantic schemas in ``schemas``.
"""

from .session import BrainstormSession, Idea  # noqa: F401
