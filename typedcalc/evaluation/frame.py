from __future__ import annotations

from typing import Iterator, List, Optional

from typedcalc import CalcValue
from typedcalc.errors import CalcStackError
from typedcalc.types.scope import Scope


class Stack:
    """LIFO operand stack of TypedValues."""

    __slots__ = ("_items",)

    def __init__(self):
        self._items: List[CalcValue] = []

    def push(self, value: CalcValue) -> None:
        self._items.append(value)

    def pop(self) -> CalcValue:
        if not self._items:
            raise CalcStackError("Stack underflow")
        return self._items.pop()

    def pop_n(self, n: int) -> List[CalcValue]:
        """Pop `n` values, returned in the order they were pushed."""
        if n > len(self._items):
            raise CalcStackError(f"Stack underflow: need {n} values, have {len(self._items)}")
        if n == 0:
            return []
        values = self._items[-n:]
        del self._items[-n:]
        return values

    def peek(self) -> CalcValue:
        if not self._items:
            raise CalcStackError("Stack underflow")
        return self._items[-1]

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CalcValue]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"


class Frame:
    """Execution context of one invocation: operand stack plus active scope."""

    __slots__ = ("scope", "stack", "depth")

    def __init__(self, scope: Scope, stack: Optional[Stack] = None, depth: int = 0):
        self.scope = scope
        self.stack = stack if stack is not None else Stack()
        self.depth = depth

    @classmethod
    def new_top_frame(cls, scope: Scope) -> Frame:
        return cls(scope)

    @classmethod
    def new_local_frame(cls, parent_scope: Scope, caller: Optional[Frame] = None) -> Frame:
        """Fresh stack and a new local scope layered on `parent_scope`."""
        depth = caller.depth + 1 if caller is not None else 1
        return cls(Scope(parent_scope), depth=depth)

    def __repr__(self) -> str:
        return f"<Frame depth={self.depth} stack={len(self.stack)}>"
