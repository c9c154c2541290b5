"""
Application package initializer.

The code is split into layers: ``models`` holds the domain records,
``repositories`` stores them, ``services`` contains validation, the
session use cases and the mapping to response views, and ``api``
translates HTTP requests into service calls.  Routers are grouped
under ``api/<version>/``.
"""

from .main import app  # noqa: F401
