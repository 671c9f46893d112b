"""
Top-level package for the Users API.

All functionality lives in submodules under ``app``; the ASGI
application is ``users_api.app.main:app``.
"""

__all__ = []
