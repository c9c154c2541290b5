"""
Top‑level package for the Brainstormer API.

The package itself exports nothing; the application, its services and
its routers live in submodules under ``app``.  Keeping the outer
package lets tests import modules by fully qualified names such as
``brainstormer_api.app.main``.
"""

__all__ = []
