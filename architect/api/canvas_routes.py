"""
Canvas Routes
==============

API routes for whole-document operations: state, theme, layout, brand,
history, import/export, preview, templates and premade projects.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel

from ..canvas.document_store import InvalidImportError
from ..models.document_models import BrandPatch, DocumentState, Theme
from ..services.catalog import get_premade, get_template
from ..services.code_generator import EXPORT_FORMATS, export_filename, generate_code
from ..services.preview_renderer import PreviewMode, render_preview

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/canvas", tags=["canvas"])

# Injected by server
session = None


def get_session():
    """Dependency to get the editor session."""
    if session is None:
        raise HTTPException(status_code=500, detail="Editor session not initialized")
    return session


class CanvasStateResponse(BaseModel):
    """Document plus the view/history info the editor shows next to it."""
    elements: List[Dict[str, Any]]
    theme: str
    columns: int
    brand: Dict[str, Any]
    selected_id: Optional[str] = None
    can_undo: bool = False
    can_redo: bool = False


class ThemeRequest(BaseModel):
    theme: Theme


class ColumnsRequest(BaseModel):
    columns: int


class SyncBrandRequest(BaseModel):
    fields: List[str] = ["radius"]


def state_response(state: Optional[DocumentState] = None) -> CanvasStateResponse:
    s = get_session()
    state = state or s.state
    data = state.to_storage_dict()
    return CanvasStateResponse(
        elements=data["elements"],
        theme=data["theme"],
        columns=data["columns"],
        brand=data["brand"],
        selected_id=s.view.selected_id,
        can_undo=s.store.history.can_undo,
        can_redo=s.store.history.can_redo,
    )


@router.get("/state")
async def get_state() -> CanvasStateResponse:
    """Get the current document."""
    return state_response()


@router.delete("/state")
async def clear_canvas() -> CanvasStateResponse:
    """Remove every element (undoable)."""
    return state_response(get_session().clear_canvas())


@router.put("/theme")
async def set_theme(request: ThemeRequest) -> CanvasStateResponse:
    return state_response(get_session().store.set_theme(request.theme))


@router.put("/columns")
async def set_columns(request: ColumnsRequest) -> CanvasStateResponse:
    try:
        state = get_session().store.set_columns(request.columns)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return state_response(state)


@router.put("/brand")
async def set_brand(patch: BrandPatch) -> CanvasStateResponse:
    """Merge brand tokens."""
    return state_response(get_session().store.set_brand(patch))


@router.post("/sync-brand")
async def sync_brand(request: SyncBrandRequest) -> CanvasStateResponse:
    """Force brand tokens onto every element."""
    try:
        state = get_session().store.sync_brand(request.fields)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return state_response(state)


@router.post("/undo")
async def undo() -> CanvasStateResponse:
    return state_response(get_session().undo())


@router.post("/redo")
async def redo() -> CanvasStateResponse:
    return state_response(get_session().redo())


@router.get("/history")
async def history() -> Dict[str, Any]:
    return get_session().store.history_info()


@router.post("/import")
async def import_state(payload: Any = Body(...)) -> CanvasStateResponse:
    """Replace the document from an exported JSON blob (object or JSON text)."""
    try:
        state = get_session().import_state(payload)
    except InvalidImportError as e:
        logger.warning(f"[DOC-STORE] Import rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return state_response(state)


@router.get("/export/{fmt}")
async def export(fmt: str, download: bool = False) -> Response:
    """Generated code for one of the export formats."""
    if fmt not in EXPORT_FORMATS:
        raise HTTPException(status_code=404, detail=f"Unknown export format: {fmt}")
    s = get_session()
    code = generate_code(fmt, s.state)
    s.view.code_format = fmt
    headers = {}
    if download:
        headers["Content-Disposition"] = f'attachment; filename="{export_filename(fmt)}"'
    return Response(content=code, media_type=EXPORT_FORMATS[fmt].media_type, headers=headers)


@router.get("/preview", response_class=HTMLResponse)
async def preview(mode: Optional[PreviewMode] = None) -> HTMLResponse:
    s = get_session()
    if mode is not None:
        s.view.preview_mode = mode
    return HTMLResponse(render_preview(s.state, s.view.preview_mode))


@router.post("/template/{name}")
async def add_template(name: str) -> CanvasStateResponse:
    """Append a built-in template as one undoable step."""
    template = get_template(name)
    if template is None:
        raise HTTPException(status_code=404, detail=f"Template not found: {name}")
    return state_response(get_session().store.add_template(template.elements))


@router.post("/premade/{name}")
async def load_premade(name: str) -> CanvasStateResponse:
    """Replace the canvas with a premade project (brand is kept)."""
    project = get_premade(name)
    if project is None:
        raise HTTPException(status_code=404, detail=f"Premade project not found: {name}")
    return state_response(get_session().load_premade(project))
