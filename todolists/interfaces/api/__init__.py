"""API interface for todolists.

This module exports the FastAPI router and app factory.
"""

from todolists.interfaces.api.routes import create_app, router

__all__ = ["router", "create_app"]
