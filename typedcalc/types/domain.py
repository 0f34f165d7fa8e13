"""Dynamic type registry and the tagged value wrapper used for every runtime datum.

A TypeDomain maps type tags (Python classes) to display names and constructs
TypedValues. Each TypedValue carries its domain, tag and raw payload; it is
never mutated after construction and has no structural equality, so sentinels
such as the domain's null value are compared by identity.
"""

from __future__ import annotations

from typing import Any

from typedcalc.errors import CalcTypeError
from typedcalc.types.nil import Null, NullType


class TypeDomain:
    """Registry of valid type tags and factory for TypedValues."""

    __slots__ = ("_names", "null_value")

    def __init__(self):
        self._names: dict[type, str] = {}
        self.register_type(NullType, "null")
        self.null_value: TypedValue = self.create(NullType, Null)

    @classmethod
    def default(cls) -> TypeDomain:
        """A domain with every type the core runtime produces."""
        from typedcalc.types.symbol import Symbol
        from typedcalc.types.cons import Cons
        from typedcalc.compiler.code import Code
        from typedcalc.evaluation.callable import Callable

        domain = cls()
        domain.register_type(bool, "bool")
        domain.register_type(int, "int")
        domain.register_type(float, "float")
        domain.register_type(str, "str")
        domain.register_type(Symbol, "symbol")
        domain.register_type(Cons, "cons")
        domain.register_type(Code, "code")
        domain.register_type(Callable, "callable")
        return domain

    def register_type(self, tag: type, name: str) -> None:
        existing = self._names.get(tag)
        if existing is not None and existing != name:
            raise CalcTypeError(
                f"Type {tag.__name__} already registered as '{existing}', cannot rename to '{name}'"
            )
        self._names[tag] = name

    def is_registered(self, tag: type) -> bool:
        return tag in self._names

    def type_name(self, tag: type) -> str:
        try:
            return self._names[tag]
        except KeyError:
            raise CalcTypeError(f"Type {tag.__name__} is not registered in this domain") from None

    def create(self, tag: type, payload: Any) -> TypedValue:
        if tag not in self._names:
            raise CalcTypeError(f"Type {tag.__name__} is not registered in this domain")
        # bool subclasses int; keep the tag and the payload type consistent
        if not isinstance(payload, tag) or (type(payload) is bool and tag is not bool):
            raise CalcTypeError(
                f"Payload {payload!r} is not a valid {self._names[tag]}"
            )
        return TypedValue(self, tag, payload)

    def wrap(self, payload: Any) -> TypedValue:
        """Create a value, choosing the tag from the payload's Python type."""
        if payload is Null:
            return self.null_value
        for tag in type(payload).__mro__:
            if tag in self._names:
                return TypedValue(self, tag, payload)
        raise CalcTypeError(f"No registered type for {type(payload).__name__}")


class TypedValue:
    """Immutable {domain, type, value} triple."""

    __slots__ = ("domain", "type", "value")

    def __init__(self, domain: TypeDomain, tag: type, payload: Any):
        object.__setattr__(self, "domain", domain)
        object.__setattr__(self, "type", tag)
        object.__setattr__(self, "value", payload)

    def __setattr__(self, key, value):
        raise AttributeError("TypedValue is immutable")

    def __delattr__(self, key):
        raise AttributeError("TypedValue is immutable")

    def is_(self, tag: type) -> bool:
        return self.type is tag

    def as_(self, tag: type, description: str) -> Any:
        if self.type is not tag:
            raise CalcTypeError(
                f"Expected {self.domain.type_name(tag)} as {description}, "
                f"got {self.domain.type_name(self.type)}: {self}"
            )
        return self.value

    def unwrap(self, tag: type) -> Any:
        # Caller has already checked the tag
        return self.value

    @property
    def type_name(self) -> str:
        return self.domain.type_name(self.type)

    def __str__(self) -> str:
        from typedcalc.debug_utils.pprint import format_value
        return format_value(self)

    def __repr__(self) -> str:
        return f"<{self.type_name}: {self}>"
