"""
bstack.core.stack — Bounded, singly-linked string stack.

Each push allocates a node that links to the previous top,
each pop detaches the top node. The stack is the only owner
of its chain; nodes are never handed out.

    s = BoundedStack(3)
    s.try_push("a")        # True
    ok, value = s.try_pop()
    s.peek(0)              # None when empty

Full, empty and out-of-range are reported through return
values, never exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


class _Node:
    """A single stack cell: one value and the link to the cell below."""

    __slots__ = ("value", "next")

    def __init__(self, value: str, next_node: _Node | None = None):
        self.value = value
        self.next = next_node


@dataclass(frozen=True)
class PopResult:
    """Outcome of try_pop().

    Truthy iff the pop succeeded. Unpacks as (succeeded, value).
    """
    succeeded: bool
    value: str = ""

    def __bool__(self) -> bool:
        return self.succeeded

    def __iter__(self) -> Iterator[bool | str]:
        yield self.succeeded
        yield self.value


class BoundedStack:
    """LIFO container of strings with a fixed maximum capacity."""

    def __init__(self, max_capacity: int):
        # Used verbatim as the fullness threshold
        self._max_capacity = max_capacity
        self._top: _Node | None = None
        self._count = 0

    @property
    def max_capacity(self) -> int:
        return self._max_capacity

    @property
    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    @property
    def is_empty(self) -> bool:
        return self._top is None

    @property
    def is_full(self) -> bool:
        # count == max_capacity, or any negative capacity
        return self._count == self._max_capacity or self._max_capacity < 0

    def try_push(self, value: str) -> bool:
        """Push value on top.

        Returns:
            False (and leaves the stack unchanged) if the stack is full
        """
        if self.is_full:
            return False

        self._top = _Node(value, self._top)
        self._count += 1
        return True

    def try_pop(self) -> PopResult:
        """Remove the top value.

        Returns:
            PopResult(True, value), or PopResult(False, "") when empty
        """
        if self._top is None:
            return PopResult(False, "")

        node = self._top
        self._top = node.next
        node.next = None
        self._count -= 1
        return PopResult(True, node.value)

    def peek(self, depth: int) -> str | None:
        """Value at depth (0 = top), or None past the bottom.

        A negative depth never walks and yields the top value.
        """
        current = self._top
        for _ in range(depth):
            if current is None:
                return None
            current = current.next
        return current.value if current is not None else None

    def is_homogeneous(self) -> bool:
        """True if every value equals the top value (vacuously when empty)."""
        if self._top is None:
            return True
        first = self._top.value
        current = self._top
        while current is not None:
            if current.value != first:
                return False
            current = current.next
        return True

    def __repr__(self) -> str:
        return f"BoundedStack(count={self._count}, max_capacity={self._max_capacity})"
