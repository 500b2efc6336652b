"""
Flow Document API - FastAPI REST API for the flow designer.

Endpoints:
    GET    /api/health                  - Health check
    GET    /api/components              - List component kinds (palette)
    GET    /api/components/{kind}       - Get one component contract
    POST   /api/flows/generate          - Compile editor model to Flow JSON
    POST   /api/flows/parse             - Load Flow JSON into the editor model
    POST   /api/flows/validate          - Validate Flow JSON
    POST   /api/flows/requests/create   - Build a create-flow payload
    POST   /api/flows/requests/update   - Build an update-flow payload
"""

from .routes import components_router, flows_router
from .server import app, create_app

__all__ = [
    "create_app",
    "app",
    "flows_router",
    "components_router",
]
