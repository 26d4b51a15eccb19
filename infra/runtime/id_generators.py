from __future__ import annotations

import uuid


class SequentialIdGenerator:
    """Integer identities handed out in increasing order, like an identity column."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value


class UuidIdGenerator:
    def __init__(self, prefix: str = "id") -> None:
        self._prefix = prefix

    def next_id(self) -> str:
        return f"{self._prefix}-{uuid.uuid4().hex[:12]}"
