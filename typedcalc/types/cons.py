"""Immutable cons cells forming singly linked lists of TypedValues."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from typedcalc import CalcValue
from typedcalc.types.domain import TypeDomain


class Cons:
    """A (head, tail) pair. Lists end in a non-cons terminator, usually the null value."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: CalcValue, cdr: CalcValue):
        object.__setattr__(self, "car", car)
        object.__setattr__(self, "cdr", cdr)

    def __setattr__(self, key, value):
        raise AttributeError("Cons is immutable")

    @classmethod
    def from_values(
        cls,
        domain: TypeDomain,
        values: Iterable[CalcValue],
        terminator: Optional[CalcValue] = None,
    ) -> CalcValue:
        """Build a list holding `values` in order; an empty input gives the terminator."""
        result = terminator if terminator is not None else domain.null_value
        for value in reversed(list(values)):
            result = domain.create(Cons, cls(value, result))
        return result

    def linear(self) -> Iterator[tuple[CalcValue, bool]]:
        """Yield (element, is_last) for each element before the terminator."""
        cell = self
        while True:
            tail = cell.cdr
            if tail.is_(Cons):
                yield cell.car, False
                cell = tail.unwrap(Cons)
            else:
                yield cell.car, True
                return

    def terminator(self) -> CalcValue:
        cell = self
        while cell.cdr.is_(Cons):
            cell = cell.cdr.unwrap(Cons)
        return cell.cdr

    def to_list(self) -> list[CalcValue]:
        return [value for value, _ in self.linear()]

    def __iter__(self) -> Iterator[CalcValue]:
        for value, _ in self.linear():
            yield value

    def __len__(self) -> int:
        return sum(1 for _ in self.linear())

    def __repr__(self) -> str:
        return f"Cons({self.car!r}, {self.cdr!r})"
