"""
Component registry endpoints for the flowdoc API.

The editor palette reads these to know which fields and actions each
component kind accepts.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from flowdoc.spec.registry import lookup, list_kinds, list_specs

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/components", tags=["components"])


class ComponentSpecResponse(BaseModel):
    """Structural contract of one component kind."""

    kind: str
    category: str
    identifier_kind: str
    required_fields: List[str]
    optional_fields: List[str]
    forbidden_fields: List[str]
    action_slot: str
    allowed_action_names: List[str]
    requires_terminal: bool
    requires_data_model: bool


class ComponentListResponse(BaseModel):
    """Response for listing component kinds."""

    components: List[ComponentSpecResponse]
    count: int = Field(..., description="Number of kinds returned")


@router.get("", response_model=ComponentListResponse)
async def list_components(category: Optional[str] = None):
    """List registered component kinds, optionally filtered by category."""
    specs = list_specs(category)
    return ComponentListResponse(
        components=[ComponentSpecResponse(**spec.to_dict()) for spec in specs],
        count=len(specs),
    )


@router.get("/{kind}", response_model=ComponentSpecResponse)
async def get_component(kind: str) -> Dict[str, Any]:
    """Get the contract for one component kind.

    Raises:
        404: Kind is not registered.
    """
    spec = lookup(kind)
    if spec is None:
        raise HTTPException(
            status_code=404,
            detail={
                "error": "component_not_found",
                "message": f"Component kind '{kind}' not found",
                "details": {"kind": kind, "supported": list_kinds()},
            },
        )
    return spec.to_dict()
