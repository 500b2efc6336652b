"""
Flow document endpoints for the flowdoc API.

Provides REST endpoints for:
- Compiling an editor model into a Flow Document
- Loading a Flow Document back into the editor model
- Validating a Flow Document
- Building create/update request payloads for the messaging platform

Compilation is lenient: unsupported components come back as warnings
instead of failing the request.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from flowdoc.spec.compiler import FlowCompiler, build_create_request, build_update_request
from flowdoc.spec.errors import DocumentParseError, MissingDocumentNameError
from flowdoc.spec.parser import parse_document
from flowdoc.validator.flow_validator import validate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flows", tags=["flows"])


# =============================================================================
# Pydantic Models
# =============================================================================


class EditorFlowRequest(BaseModel):
    """Editor model as stored by the flow designer."""

    name: Optional[str] = Field(default=None, description="Flow name (required to compile)")
    categories: List[str] = Field(
        default_factory=list,
        description="Platform categories; defaults to the configured categories",
    )
    screens: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Editor screens: {id, title, data: {header, body, footer, actions, dataModel}}",
    )


class CompileWarningResponse(BaseModel):
    """A component the compiler dropped or adjusted."""

    code: str
    message: str
    screen_id: str = ""
    location: str = ""
    kind: str = ""


class GenerateResponse(BaseModel):
    """Response from the generate endpoint."""

    document: Dict[str, Any]
    warnings: List[CompileWarningResponse] = Field(default_factory=list)


class DocumentRequest(BaseModel):
    """A Flow Document, as a JSON object or a JSON string."""

    document: Union[Dict[str, Any], str] = Field(..., description="Flow JSON object or string")
    name: Optional[str] = Field(default=None, description="Flow name to attach when parsing")


class ValidationResponse(BaseModel):
    """Response for the validate endpoint."""

    valid: bool
    errors: List[str]
    details: List[Dict[str, Any]] = Field(default_factory=list)
    warnings: List[Dict[str, Any]] = Field(default_factory=list)


# =============================================================================
# Helper Functions
# =============================================================================


def _missing_name(e: MissingDocumentNameError) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={
            "error": "missing_name",
            "message": str(e),
            "details": {"name": e.name},
        },
    )


def _parse_error(e: DocumentParseError) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={
            "error": "parse_error",
            "message": str(e),
            "details": {"reason": e.message},
        },
    )


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/generate", response_model=GenerateResponse)
async def generate_flow(request: EditorFlowRequest):
    """Compile an editor model into a Flow Document.

    Returns:
        GenerateResponse with the document and any compile warnings.

    Raises:
        400: The flow has no name.
    """
    try:
        result = FlowCompiler().compile(request.model_dump())
    except MissingDocumentNameError as e:
        raise _missing_name(e)

    if result.warnings:
        logger.info("Compiled '%s' with %d warnings", request.name, len(result.warnings))
    return GenerateResponse(
        document=result.document.to_dict(),
        warnings=[CompileWarningResponse(**w.to_dict()) for w in result.warnings],
    )


@router.post("/parse")
async def parse_flow(request: DocumentRequest) -> Dict[str, Any]:
    """Load a Flow Document back into the editor model.

    Raises:
        400: The document is not valid Flow JSON.
    """
    try:
        flow = parse_document(request.document, name=request.name)
    except DocumentParseError as e:
        raise _parse_error(e)
    return flow.to_dict()


@router.post("/validate", response_model=ValidationResponse)
async def validate_flow(request: DocumentRequest):
    """Validate a Flow Document. Always 200; problems are in the body."""
    result = validate(request.document)
    report = result.to_dict()
    return ValidationResponse(
        valid=report["valid"],
        errors=report["errors"],
        details=report["details"],
        warnings=report["warnings"],
    )


@router.post("/requests/create")
async def create_request(request: EditorFlowRequest) -> Dict[str, Any]:
    """Build the payload for creating the flow on the platform."""
    try:
        return build_create_request(request.model_dump())
    except MissingDocumentNameError as e:
        raise _missing_name(e)


@router.post("/requests/update")
async def update_request(request: EditorFlowRequest) -> Dict[str, Any]:
    """Build the payload for updating an existing flow on the platform."""
    try:
        return build_update_request(request.model_dump())
    except MissingDocumentNameError as e:
        raise _missing_name(e)
