"""
Element Routes
===============

API routes for element management.
"""

from fastapi import APIRouter, HTTPException
from typing import Any, Dict, List, Optional
from pydantic import BaseModel

from ..canvas.reorder import Direction
from ..models.element_models import ElementProps, ElementType, search_components
from .canvas_routes import CanvasStateResponse, state_response

router = APIRouter(prefix="/api/element", tags=["elements"])

# Injected by server
session = None


def get_session():
    """Dependency to get the editor session."""
    if session is None:
        raise HTTPException(status_code=500, detail="Editor session not initialized")
    return session


class AddElementRequest(BaseModel):
    """Request to add an element."""
    type: ElementType


class ElementResponse(BaseModel):
    """Response for element creation."""
    element_id: str
    type: ElementType
    message: str


class LabelRequest(BaseModel):
    label: str


class MoveRequest(BaseModel):
    direction: Direction


class ReorderRequest(BaseModel):
    """Drag-end reorder: move ``from_id`` to the position of ``to_id``."""
    from_id: str
    to_id: str


class SelectRequest(BaseModel):
    element_id: Optional[str] = None


@router.get("/registry")
async def registry(q: str = "", group: Optional[str] = None) -> List[Dict[str, Any]]:
    """Component palette, optionally filtered."""
    return [c.model_dump(mode="json") for c in search_components(q, group)]


@router.post("")
async def add_element(request: AddElementRequest) -> ElementResponse:
    """Add element to canvas and select it."""
    element_id = get_session().add_element(request.type)
    return ElementResponse(element_id=element_id, type=request.type, message="Element added")


@router.post("/select")
async def select_element(request: SelectRequest) -> Dict[str, Any]:
    try:
        get_session().select(request.element_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Element not found")
    return {"selected_id": request.element_id}


@router.put("/{element_id}/label")
async def update_label(element_id: str, request: LabelRequest) -> CanvasStateResponse:
    return state_response(get_session().store.update_label(element_id, request.label))


@router.patch("/{element_id}/props")
async def update_props(element_id: str, patch: ElementProps) -> CanvasStateResponse:
    """Merge the given props into the element (camelCase or snake_case keys)."""
    return state_response(get_session().store.update_props(element_id, patch))


@router.delete("/{element_id}")
async def remove_element(element_id: str) -> CanvasStateResponse:
    """Remove element from canvas."""
    return state_response(get_session().delete_element(element_id))


@router.post("/{element_id}/duplicate")
async def duplicate_element(element_id: str) -> CanvasStateResponse:
    return state_response(get_session().store.duplicate_element(element_id))


@router.post("/{element_id}/move")
async def move_element(element_id: str, request: MoveRequest) -> CanvasStateResponse:
    return state_response(get_session().store.move_element(element_id, request.direction))


@router.post("/reorder")
async def reorder(request: ReorderRequest) -> CanvasStateResponse:
    return state_response(get_session().store.reorder(request.from_id, request.to_id))
