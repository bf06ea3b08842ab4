"""
Project Routes
==============

Saved projects (named snapshots keyed by name) and the keyboard surface.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..services.catalog import PREMADE_PROJECTS
from .canvas_routes import CanvasStateResponse, state_response

router = APIRouter(prefix="/api/projects", tags=["projects"])
shortcut_router = APIRouter(prefix="/api", tags=["editor"])

# Injected by server
session = None


def get_session():
    """Dependency to get the editor session."""
    if session is None:
        raise HTTPException(status_code=500, detail="Editor session not initialized")
    return session


class SaveProjectRequest(BaseModel):
    name: Optional[str] = None


class ShortcutRequest(BaseModel):
    """A key event from the editor surface."""
    key: str
    ctrl: bool = False
    shift: bool = False
    in_text_input: bool = False


def _summary(project) -> Dict[str, Any]:
    return {
        "id": project.id,
        "name": project.name,
        "icon": project.icon,
        "savedAt": project.saved_at,
        "elements": len(project.state.elements),
    }


@router.get("")
async def list_projects() -> Dict[str, List[Dict[str, Any]]]:
    """Saved projects plus the built-in premade ones."""
    s = get_session()
    saved = s.state_manager.list_projects() if s.state_manager else []
    return {
        "saved": [_summary(p) for p in saved],
        "premade": [_summary(p) for p in PREMADE_PROJECTS],
    }


@router.post("/save")
async def save_project(request: SaveProjectRequest) -> Dict[str, Any]:
    """Save the current document (replaces a project with the same name)."""
    project = get_session().save_project(request.name)
    if project is None:
        raise HTTPException(status_code=500, detail="Persistence not configured")
    return _summary(project)


@router.post("/load/{name}")
async def load_project(name: str) -> CanvasStateResponse:
    s = get_session()
    project = s.state_manager.get_project(name) if s.state_manager else None
    if project is None:
        raise HTTPException(status_code=404, detail=f"Project not found: {name}")
    return state_response(s.load_project(project))


@router.delete("/{name}")
async def delete_project(name: str) -> Dict[str, Any]:
    s = get_session()
    if s.state_manager is None or not s.state_manager.delete_project(name):
        raise HTTPException(status_code=404, detail=f"Project not found: {name}")
    return {"message": "Project deleted", "name": name}


@shortcut_router.post("/shortcut")
async def shortcut(request: ShortcutRequest) -> Dict[str, Any]:
    """Apply a keyboard shortcut; reports whether it was handled."""
    s = get_session()
    handled = s.handle_shortcut(request.key, request.ctrl, request.shift, request.in_text_input)
    return {
        "handled": handled,
        "view": s.view.model_dump(mode="json"),
        "state": state_response().model_dump(),
    }
