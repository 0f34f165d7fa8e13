"""Lexical scopes (symbol maps) for typedcalc.

A Scope binds names to either a TypedValue or a Callable and links to an
optional parent. The global scope has no parent. Closures and promises hold a
reference to the scope active where they were created, so a scope can be shared
by several callables and child scopes at once.
"""

from __future__ import annotations

from io import StringIO
from typing import Any, Optional

from typedcalc.errors import CalcInvalidSymbol, CalcUnboundSymbol


class Scope:
    """Hierarchical mapping from names to bound values or callables."""

    __slots__ = ("vars", "parent")

    def __init__(self, parent: Optional[Scope] = None):
        self.vars: dict[str, Any] = {}
        self.parent: Scope | None = parent

    @property
    def is_global(self) -> bool:
        return self.parent is None

    def put(self, name: str, value: Any) -> None:
        """Bind `name` in this scope, shadowing any outer binding."""
        if not isinstance(name, str):
            raise CalcInvalidSymbol(f"Cannot bind {name!r} as a symbol")
        self.vars[name] = value

    def find(self, name: str) -> Optional[Scope]:
        """Find the nearest scope in the chain that binds `name`."""
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.vars:
                return scope
            scope = scope.parent
        return None

    def contains(self, name: str) -> bool:
        return self.find(name) is not None

    def get(self, name: str) -> Any:
        scope = self.find(name)
        if scope is None:
            raise CalcUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return scope.vars[name]

    def set(self, name: str, value: Any) -> None:
        """Rebind `name` where it is currently bound.

        Raises CalcUnboundSymbol if no scope in the chain binds it.
        """
        scope = self.find(name)
        if scope is None:
            raise CalcUnboundSymbol(f"Cannot set unbound symbol {name}")
        scope.vars[name] = value

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
            buffer.write("}")
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        depth = 0
        scope = self.parent
        while scope is not None:
            depth += 1
            scope = scope.parent
        return f"<Scope {sorted(self.vars)} depth={depth}>"
