"""
History Manager
===============

Bounded linear undo/redo over full document snapshots.
"""

import logging
from typing import Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50

S = TypeVar("S")


class HistoryManager(Generic[S]):
    """
    Two bounded stacks of complete prior states.

    ``past`` is ordered oldest to newest; ``future`` holds undone states,
    most recently undone first. Only ``commit`` clears ``future``.
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT):
        if limit < 1:
            raise ValueError("history limit must be at least 1")
        self.limit = limit
        self.past: List[S] = []
        self.future: List[S] = []

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    def commit(self, previous: S) -> None:
        """Record the state that a new edit is replacing."""
        self.past.append(previous)
        self._evict()
        self.future.clear()

    def undo(self, current: S) -> Optional[S]:
        """Step back; returns the state to make current, or None if nothing to undo."""
        if not self.past:
            return None
        previous = self.past.pop()
        self.future.insert(0, current)
        logger.debug(f"[HISTORY] undo -> past={len(self.past)} future={len(self.future)}")
        return previous

    def redo(self, current: S) -> Optional[S]:
        """Step forward; returns the state to make current, or None if nothing to redo."""
        if not self.future:
            return None
        following = self.future.pop(0)
        self.past.append(current)
        self._evict()
        logger.debug(f"[HISTORY] redo -> past={len(self.past)} future={len(self.future)}")
        return following

    def clear(self) -> None:
        self.past.clear()
        self.future.clear()

    def _evict(self) -> None:
        overflow = len(self.past) - self.limit
        if overflow > 0:
            del self.past[:overflow]
