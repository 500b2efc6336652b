"""
Routes package for the flowdoc API.

This package contains the FastAPI routers for:
- flows: generate, parse, validate and platform request payloads
- components: component registry listing for the editor palette
"""

from .components import router as components_router
from .flows import router as flows_router

__all__ = [
    "flows_router",
    "components_router",
]
