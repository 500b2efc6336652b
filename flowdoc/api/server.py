"""
FastAPI REST API server for the flow designer.

Exposes the flow compiler, the reverse compiler, the validator and the
component registry to the editor frontend.

Usage:
    # Run standalone
    python -m flowdoc.api.server

    # Or via factory
    from flowdoc.api import create_app
    app = create_app()
    uvicorn.run(app, port=5002)

API Structure:
    /api/flows/       - Generate, parse, validate, request payloads (routes/flows.py)
    /api/components/  - Component registry (routes/components.py)
    /api/health       - Health check
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from flowdoc import __version__
from flowdoc.config.compiler_config import get_data_api_version, get_flow_json_version
from flowdoc.spec.registry import list_kinds

from .routes import components_router, flows_router

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str
    timestamp: str
    version: str
    flow_json_version: str
    data_api_version: str
    component_kinds: int


def create_app(enable_cors: bool = True) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        enable_cors: Whether to enable CORS middleware.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="Flow Document API",
        description="Compile, parse and validate messaging-platform Flow Documents.",
        version=__version__,
    )

    if enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )

    app.include_router(flows_router, prefix="/api")
    app.include_router(components_router, prefix="/api")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        duration = time.time() - start_time
        logger.info(
            "%s %s %s %.3fs",
            request.method,
            request.url.path,
            response.status_code,
            duration,
        )
        return response

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(
            status="ok",
            timestamp=datetime.now(timezone.utc).isoformat(timespec="seconds"),
            version=__version__,
            flow_json_version=get_flow_json_version(),
            data_api_version=get_data_api_version(),
            component_kinds=len(list_kinds()),
        )

    return app


app = create_app()


def main():
    """Run the API server."""
    import argparse

    import uvicorn

    parser = argparse.ArgumentParser(description="Flow Document API Server")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--port", type=int, default=5002, help="Port to bind to")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    parser.add_argument("--no-cors", action="store_true", help="Disable CORS")
    args = parser.parse_args()

    global app
    app = create_app(enable_cors=not args.no_cors)

    print(f"Starting Flow Document API server at http://{args.host}:{args.port}")
    print("    GET    /api/health                   - Health check")
    print("    GET    /api/components               - List component kinds")
    print("    GET    /api/components/{kind}        - Get component contract")
    print("    POST   /api/flows/generate           - Editor model -> Flow JSON")
    print("    POST   /api/flows/parse              - Flow JSON -> editor model")
    print("    POST   /api/flows/validate           - Validate Flow JSON")
    print("    POST   /api/flows/requests/create    - Create request payload")
    print("    POST   /api/flows/requests/update    - Update request payload")

    uvicorn.run(app, host=args.host, port=args.port, log_level="debug" if args.debug else "info")


if __name__ == "__main__":
    main()
