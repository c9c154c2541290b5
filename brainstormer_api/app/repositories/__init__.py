"""
Storage for domain records.

Only an in-memory implementation exists.  Services talk to it through
awaitable methods so a persistent store can replace it without
changing the callers.
"""

from .session_repository import InMemorySessionRepository  # noqa: F401
