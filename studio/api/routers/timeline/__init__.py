"""
Timeline router package.

Exports the router for session timeline endpoints.
"""

from .timeline_router import router

__all__ = ["router"]
