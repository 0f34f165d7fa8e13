from __future__ import annotations
import sys

from typedcalc.errors import CalcInvalidSymbol


class Symbol:
    """Interned identifier. Use Symbol.get(name); equal names give the same instance."""

    __slots__ = ("value",)

    _interned: dict[str, Symbol] = {}

    def __init__(self, name: str):
        self.value = sys.intern(name)

    @classmethod
    def get(cls, name: str) -> Symbol:
        if not isinstance(name, str):
            raise CalcInvalidSymbol(f"Symbol name must be a string, got {type(name).__name__}")
        sym = cls._interned.get(name)
        if sym is None:
            sym = cls(name)
            cls._interned[sym.value] = sym
        return sym

    def __repr__(self):
        return f"Symbol({self.value!r})"

    def __str__(self):
        return self.value
