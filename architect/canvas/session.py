"""
Editor Session
==============

Wires the document store, its history and persistence together with the
ephemeral view state (selection, zoom, open panels). View state is never
part of the document: it is not undone, not persisted, and not saved with
projects.
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from ..models.document_models import DocumentState, Project
from ..models.element_models import ElementType
from ..services.preview_renderer import PreviewMode
from .document_store import DocumentStore
from .history import HistoryManager
from .ids import IdAllocator
from .state_manager import StateManager

logger = logging.getLogger(__name__)

ZOOM_MIN = 0.3
ZOOM_MAX = 2.5
ZOOM_STEP = 0.1
DEFAULT_PROJECT_NAME = "My Project"


class ViewState(BaseModel):
    """Ephemeral editor state."""
    selected_id: Optional[str] = None
    zoom: float = Field(default=1.0, ge=ZOOM_MIN, le=ZOOM_MAX)
    code_format: str = "tsx"
    preview_mode: PreviewMode = PreviewMode.DESKTOP
    active_tab: str = "components"
    show_ai: bool = False
    show_themes: bool = False
    show_projects: bool = False
    project_name: str = DEFAULT_PROJECT_NAME

    class Config:
        validate_assignment = True


def clamp_zoom(value: float) -> float:
    return round(min(ZOOM_MAX, max(ZOOM_MIN, value)), 2)


class EditorSession:
    """Single-writer editing session over one document."""

    def __init__(
        self,
        state_manager: Optional[StateManager] = None,
        history_limit: int = 50,
        ids: Optional[IdAllocator] = None,
    ):
        self.state_manager = state_manager
        initial = state_manager.load_state() if state_manager else DocumentState()
        self.store = DocumentStore(
            state=initial,
            ids=ids,
            history=HistoryManager(limit=history_limit),
            persist=state_manager.save_state if state_manager else None,
        )
        self.view = ViewState()

    @property
    def state(self) -> DocumentState:
        return self.store.state

    # ------------------------------------------------------------------
    # Selection-aware operations
    # ------------------------------------------------------------------

    def add_element(self, element_type: ElementType) -> str:
        element_id = self.store.add_element(element_type)
        self.view.selected_id = element_id
        return element_id

    def delete_element(self, element_id: str) -> DocumentState:
        state = self.store.delete_element(element_id)
        if self.view.selected_id == element_id:
            self.view.selected_id = None
        return state

    def delete_selected(self) -> bool:
        if self.view.selected_id is None:
            return False
        self.delete_element(self.view.selected_id)
        return True

    def duplicate_selected(self) -> bool:
        if self.view.selected_id is None:
            return False
        self.store.duplicate_element(self.view.selected_id)
        return True

    def select(self, element_id: Optional[str]) -> None:
        if element_id is not None and self.state.find(element_id) is None:
            raise KeyError(element_id)
        self.view.selected_id = element_id

    def clear_canvas(self) -> DocumentState:
        self.view.selected_id = None
        return self.store.clear_canvas()

    def import_state(self, payload) -> DocumentState:
        state = self.store.import_state(payload)
        self.view.selected_id = None
        return state

    def load_premade(self, project: Project) -> DocumentState:
        state = self.store.load_premade(project.state)
        self.view.selected_id = None
        self.view.project_name = project.name
        self.view.active_tab = "layers"
        return state

    def load_project(self, project: Project) -> DocumentState:
        state = self.store.load_project(project)
        self.view.selected_id = None
        self.view.project_name = project.name
        self.view.show_projects = False
        return state

    def undo(self) -> DocumentState:
        state = self.store.undo()
        self._drop_stale_selection()
        return state

    def redo(self) -> DocumentState:
        state = self.store.redo()
        self._drop_stale_selection()
        return state

    def _drop_stale_selection(self) -> None:
        if self.view.selected_id and self.state.find(self.view.selected_id) is None:
            self.view.selected_id = None

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    def save_project(self, name: Optional[str] = None) -> Optional[Project]:
        if self.state_manager is None:
            logger.warning("[STATE-MANAGER] Save requested without persistence configured")
            return None
        name = (name or self.view.project_name).strip() or DEFAULT_PROJECT_NAME
        self.view.project_name = name
        return self.state_manager.save_project(name, self.state)

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------

    def set_zoom(self, value: float) -> float:
        self.view.zoom = clamp_zoom(value)
        return self.view.zoom

    def close_panels(self) -> None:
        self.view.selected_id = None
        self.view.show_ai = False
        self.view.show_themes = False
        self.view.show_projects = False

    def handle_shortcut(self, key: str, ctrl: bool = False, shift: bool = False,
                        in_text_input: bool = False) -> bool:
        """
        Apply a keyboard shortcut.

        Save and Escape work while a text field has focus; every other
        shortcut is ignored then. Returns True when the key was handled.
        """
        key = key.lower() if len(key) == 1 else key

        if ctrl and key == "s":
            self.save_project()
            return True
        if key == "Escape":
            self.close_panels()
            return True
        if in_text_input:
            return False

        if ctrl:
            if key == "z" and shift:
                self.redo()
            elif key == "z":
                self.undo()
            elif key == "y":
                self.redo()
            elif key == "d":
                self.duplicate_selected()
            elif key in ("=", "+"):
                self.set_zoom(self.view.zoom + ZOOM_STEP)
            elif key == "-":
                self.set_zoom(self.view.zoom - ZOOM_STEP)
            elif key == "0":
                self.set_zoom(1.0)
            else:
                return False
            return True

        if key == "Delete":
            return self.delete_selected()
        return False
