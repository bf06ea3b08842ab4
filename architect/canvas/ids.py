"""
Element id allocation.

One allocator per process; its counter is shared by every creation path
(manual add, duplicate, templates, synthesis), so ids never collide and
are never reused.
"""

import uuid
from typing import Optional

NODE_PREFIX = "NODE"
TEMPLATE_PREFIX = "T"
SYNTHESIS_PREFIX = "AI"


class IdAllocator:
    """Monotonic ``<PREFIX>-<session>-<n>`` id source."""

    def __init__(self, session: Optional[str] = None, start: int = 0):
        self.session = session or uuid.uuid4().hex[:8]
        self._counter = start

    @property
    def counter(self) -> int:
        return self._counter

    def next_id(self, prefix: str = NODE_PREFIX) -> str:
        self._counter += 1
        return f"{prefix}-{self.session}-{self._counter}"
