"""Executable steps a compiled Code sequence is made of."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from typedcalc import CalcValue
from typedcalc.errors import CalcTypeError
from typedcalc.evaluation.callable import Callable
from typedcalc.evaluation.frame import Frame


class Executable(ABC):
    @abstractmethod
    def execute(self, frame: Frame) -> None:
        ...


class Value(Executable):
    """Push a constant."""

    __slots__ = ("value",)

    def __init__(self, value: CalcValue):
        self.value = value

    def execute(self, frame: Frame) -> None:
        frame.stack.push(self.value)

    def __repr__(self) -> str:
        return f"Value({self.value})"


def resolve_callable(name: str, binding: Any) -> Callable:
    if isinstance(binding, Callable):
        return binding
    if binding.is_(Callable):
        return binding.unwrap(Callable)
    raise CalcTypeError(f"Symbol '{name}' is bound to a {binding.type_name}, which is not callable")


class SymbolGet(Executable):
    """Push the value bound to a name; a bound callable is invoked with no arguments."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def execute(self, frame: Frame) -> None:
        binding = frame.scope.get(self.name)
        if isinstance(binding, Callable):
            binding.call(frame, 0, 1)
        else:
            frame.stack.push(binding)

    def __repr__(self) -> str:
        return f"SymbolGet({self.name!r})"


class SymbolCall(Executable):
    """Invoke the callable bound to a name with the requested argument/result counts."""

    __slots__ = ("name", "args", "returns")

    def __init__(self, name: str, args: int, returns: int):
        self.name = name
        self.args = args
        self.returns = returns

    def execute(self, frame: Frame) -> None:
        binding = frame.scope.get(self.name)
        resolve_callable(self.name, binding).call(frame, self.args, self.returns)

    def __repr__(self) -> str:
        return f"SymbolCall({self.name!r}, {self.args}, {self.returns})"
