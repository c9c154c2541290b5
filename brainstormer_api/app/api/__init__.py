"""
API package.

``handler`` maps operation names to service calls and status codes
independently of HTTP; versioned FastAPI routers live in subpackages
such as ``v1`` and delegate to it.
"""
