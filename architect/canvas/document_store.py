"""
Document Store
==============

Single source of truth for the document state. Every mutation builds a
new ``DocumentState`` (untouched elements are shared with the previous
one), records the previous state in the history and mirrors the result to
the persistence callback.
"""

import json
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Union

from pydantic import ValidationError

from ..models.element_models import (
    CanvasElement,
    DEFAULT_LABELS,
    DEFAULT_PROPS,
    ElementProps,
    ElementType,
)
from ..models.document_models import BrandKit, BrandPatch, DocumentState, Project, Theme
from . import reorder as ordering
from .history import HistoryManager
from .ids import IdAllocator, NODE_PREFIX, TEMPLATE_PREFIX

logger = logging.getLogger(__name__)

# brand token -> element prop overwritten by sync_brand
BRAND_SYNC_FIELDS = {
    "radius": "radius",
    "primary": "bg",
    "secondary": "badge_color",
    "accent": "border_color",
}

PersistCallback = Callable[[DocumentState], None]


class InvalidImportError(ValueError):
    """Structured-data payload could not be turned into a document state."""


def parse_document(payload: Union[str, bytes, dict], fallback_brand: Optional[BrandKit] = None) -> DocumentState:
    """
    Parse an exported/imported blob into a DocumentState.

    Requires an ``elements`` list. A missing ``brand`` falls back to
    ``fallback_brand`` (or the default brand).
    """
    if isinstance(payload, (str, bytes)):
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise InvalidImportError(f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    else:
        data = payload

    if not isinstance(data, dict) or not isinstance(data.get("elements"), list):
        raise InvalidImportError("Payload must be an object with an 'elements' list")

    fields = {k: v for k, v in data.items() if k in ("elements", "theme", "columns", "brand")}
    if not fields.get("brand"):
        fields["brand"] = fallback_brand or BrandKit()

    try:
        state = DocumentState.model_validate(fields)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise InvalidImportError(f"Invalid document at '{location}': {first['msg']}") from e

    seen = set()
    for element in state.elements:
        if element.id in seen:
            raise InvalidImportError(f"Duplicate element id: {element.id}")
        seen.add(element.id)
    return state


class DocumentStore:
    """Owns the document state and exposes its mutation operations."""

    def __init__(
        self,
        state: Optional[DocumentState] = None,
        ids: Optional[IdAllocator] = None,
        history: Optional[HistoryManager] = None,
        persist: Optional[PersistCallback] = None,
    ):
        self._state = state or DocumentState()
        self.ids = ids or IdAllocator()
        self.history: HistoryManager = history or HistoryManager()
        self._persist = persist
        logger.info(f"[DOC-STORE] Initialized with {len(self._state.elements)} elements, session={self.ids.session}")

    @property
    def state(self) -> DocumentState:
        return self._state

    @property
    def elements(self) -> List[CanvasElement]:
        return self._state.elements

    # ------------------------------------------------------------------
    # Commit path
    # ------------------------------------------------------------------

    def _commit(self, next_state: DocumentState) -> DocumentState:
        """Make ``next_state`` current as one history entry; identical states are skipped."""
        if next_state == self._state:
            return self._state
        self.history.commit(self._state)
        self._set(next_state)
        return self._state

    def _set(self, state: DocumentState) -> None:
        self._state = state
        if self._persist is not None:
            self._persist(state)

    def _with_elements(self, elements: Sequence[CanvasElement]) -> DocumentState:
        return self._state.model_copy(update={"elements": list(elements)})

    # ------------------------------------------------------------------
    # Element lifecycle
    # ------------------------------------------------------------------

    def add_element(self, element_type: ElementType) -> str:
        """Append a new element with type defaults; returns its id."""
        element_type = ElementType(element_type)
        element = CanvasElement(
            id=self.ids.next_id(NODE_PREFIX),
            type=element_type,
            label=DEFAULT_LABELS[element_type],
            props=DEFAULT_PROPS,
        )
        self._commit(self._with_elements(ordering.append_all(self.elements, [element])))
        logger.info(f"[DOC-STORE] Added {element_type.value} {element.id}")
        return element.id

    def update_label(self, element_id: str, text: str) -> DocumentState:
        element = self._state.find(element_id)
        if element is None:
            return self._state
        updated = element.model_copy(update={"label": text})
        return self._commit(self._with_elements(ordering.replace(self.elements, element_id, updated)))

    def update_props(self, element_id: str, patch: ElementProps) -> DocumentState:
        """Merge ``patch`` into one element's props; other elements stay the same objects."""
        element = self._state.find(element_id)
        if element is None:
            return self._state
        updated = element.model_copy(update={"props": element.props.merged(patch)})
        return self._commit(self._with_elements(ordering.replace(self.elements, element_id, updated)))

    def update_all_props(self, patch: ElementProps) -> DocumentState:
        """Merge ``patch`` into every element as a single commit."""
        if not self.elements:
            return self._state
        elements = [e.model_copy(update={"props": e.props.merged(patch)}) for e in self.elements]
        return self._commit(self._with_elements(elements))

    def delete_element(self, element_id: str) -> DocumentState:
        elements = ordering.remove(self.elements, element_id)
        if elements is None:
            return self._state
        logger.info(f"[DOC-STORE] Deleted {element_id}")
        return self._commit(self._with_elements(elements))

    def duplicate_element(self, element_id: str) -> DocumentState:
        """Insert a copy (new id, same type/label/props) right after the source."""
        idx = ordering.index_of(self.elements, element_id)
        if idx < 0:
            return self._state
        source = self.elements[idx]
        copy = source.model_copy(update={"id": self.ids.next_id(NODE_PREFIX)})
        logger.info(f"[DOC-STORE] Duplicated {element_id} -> {copy.id}")
        return self._commit(self._with_elements(ordering.insert_after(self.elements, idx, copy)))

    def move_element(self, element_id: str, direction: ordering.Direction) -> DocumentState:
        elements = ordering.move_adjacent(self.elements, element_id, direction)
        if elements is None:
            return self._state
        return self._commit(self._with_elements(elements))

    def reorder(self, from_id: str, to_id: str) -> DocumentState:
        """Drag-end reorder (array-move semantics)."""
        elements = ordering.move_to(self.elements, from_id, to_id)
        if elements is None:
            return self._state
        return self._commit(self._with_elements(elements))

    def add_template_batch(self, batch: Iterable[CanvasElement]) -> DocumentState:
        """Append a precomputed batch as one commit."""
        batch = list(batch)
        if not batch:
            return self._state
        logger.info(f"[DOC-STORE] Appending batch of {len(batch)} elements")
        return self._commit(self._with_elements(ordering.append_all(self.elements, batch)))

    def add_template(self, template_elements: Iterable[CanvasElement]) -> DocumentState:
        """Re-id a catalog template's elements and append them as one commit."""
        batch = [
            e.model_copy(update={"id": self.ids.next_id(TEMPLATE_PREFIX)}) for e in template_elements
        ]
        return self.add_template_batch(batch)

    # ------------------------------------------------------------------
    # Whole-state fields
    # ------------------------------------------------------------------

    def set_theme(self, theme: Theme) -> DocumentState:
        return self._commit(self._state.model_copy(update={"theme": Theme(theme)}))

    def set_columns(self, columns: int) -> DocumentState:
        if columns not in (1, 2, 3):
            raise ValueError(f"columns must be 1, 2 or 3, got {columns}")
        return self._commit(self._state.model_copy(update={"columns": columns}))

    def clear_canvas(self) -> DocumentState:
        return self._commit(self._with_elements([]))

    def set_brand(self, patch: BrandPatch) -> DocumentState:
        brand = self._state.brand.model_copy(update=patch.model_dump(exclude_none=True))
        return self._commit(self._state.model_copy(update={"brand": brand}))

    def sync_brand(self, fields: Iterable[str] = ("radius",)) -> DocumentState:
        """Force-overwrite element props from brand tokens (one-directional)."""
        overrides: dict = {}
        for field in fields:
            if field not in BRAND_SYNC_FIELDS:
                raise ValueError(f"Unknown brand field: {field}")
            overrides[BRAND_SYNC_FIELDS[field]] = getattr(self._state.brand, field)
        if not overrides:
            return self._state
        logger.info(f"[DOC-STORE] Syncing brand fields {sorted(overrides)} to {len(self.elements)} elements")
        return self.update_all_props(ElementProps(**overrides))

    def load_premade(self, state: DocumentState) -> DocumentState:
        """Take elements/theme/columns from a catalog project; keep the current brand."""
        return self._commit(self._state.model_copy(update={
            "elements": list(state.elements),
            "theme": state.theme,
            "columns": state.columns,
        }))

    def load_project(self, project: Project) -> DocumentState:
        logger.info(f"[DOC-STORE] Loading project '{project.name}'")
        return self._commit(project.state)

    def import_state(self, payload: Union[str, bytes, dict]) -> DocumentState:
        """Replace the document from a structured-data blob; state untouched on error."""
        state = parse_document(payload, fallback_brand=self._state.brand)
        logger.info(f"[DOC-STORE] Imported {len(state.elements)} elements")
        return self._commit(state)

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def undo(self) -> DocumentState:
        previous = self.history.undo(self._state)
        if previous is not None:
            self._set(previous)
        return self._state

    def redo(self) -> DocumentState:
        following = self.history.redo(self._state)
        if following is not None:
            self._set(following)
        return self._state

    def history_info(self) -> Dict[str, Any]:
        return {
            "can_undo": self.history.can_undo,
            "can_redo": self.history.can_redo,
            "past": len(self.history.past),
            "future": len(self.history.future),
        }
