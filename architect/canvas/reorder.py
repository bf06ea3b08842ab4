"""
Reorder / Lifecycle Engine
==========================

Pure list operations over the ordered element sequence. Each function
returns a new list and never mutates its input; element objects are
reused as-is, so ids are never reassigned.

Two distinct reorderings are provided:
- ``move_adjacent``: swap with the immediate neighbour (arrow buttons)
- ``array_move``: remove then re-insert at the target index (drag end)
"""

from enum import Enum
from typing import List, Optional, Sequence, TypeVar

from ..models.element_models import CanvasElement

E = TypeVar("E", bound=CanvasElement)


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"


def index_of(elements: Sequence[E], element_id: str) -> int:
    """Position of ``element_id`` or -1."""
    for i, element in enumerate(elements):
        if element.id == element_id:
            return i
    return -1


def append_all(elements: Sequence[E], batch: Sequence[E]) -> List[E]:
    return list(elements) + list(batch)


def insert_after(elements: Sequence[E], index: int, item: E) -> List[E]:
    """Insert ``item`` directly after position ``index``."""
    result = list(elements)
    result.insert(index + 1, item)
    return result


def remove(elements: Sequence[E], element_id: str) -> Optional[List[E]]:
    """List without ``element_id``; None when the id is absent."""
    idx = index_of(elements, element_id)
    if idx < 0:
        return None
    return list(elements[:idx]) + list(elements[idx + 1:])


def replace(elements: Sequence[E], element_id: str, item: E) -> Optional[List[E]]:
    """Swap in ``item`` at the position of ``element_id``; others untouched."""
    idx = index_of(elements, element_id)
    if idx < 0:
        return None
    result = list(elements)
    result[idx] = item
    return result


def move_adjacent(elements: Sequence[E], element_id: str, direction: Direction) -> Optional[List[E]]:
    """
    Swap with the neighbour in ``direction``.

    Returns None at either boundary or for an unknown id.
    """
    idx = index_of(elements, element_id)
    if idx < 0:
        return None
    target = idx - 1 if Direction(direction) == Direction.UP else idx + 1
    if target < 0 or target >= len(elements):
        return None
    result = list(elements)
    result[idx], result[target] = result[target], result[idx]
    return result


def array_move(elements: Sequence[E], from_index: int, to_index: int) -> List[E]:
    """Remove the item at ``from_index`` and re-insert it at ``to_index``."""
    result = list(elements)
    item = result.pop(from_index)
    result.insert(to_index, item)
    return result


def move_to(elements: Sequence[E], from_id: str, to_id: str) -> Optional[List[E]]:
    """
    Drag reorder: move ``from_id`` to the current position of ``to_id``.

    Returns None when either id is unknown or both are the same element.
    """
    if from_id == to_id:
        return None
    old_index = index_of(elements, from_id)
    new_index = index_of(elements, to_id)
    if old_index < 0 or new_index < 0:
        return None
    return array_move(elements, old_index, new_index)
