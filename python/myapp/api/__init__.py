"""
HTTP routes, response models and error handlers.
"""

from myapp.api.routes import router

__all__ = ["router"]
