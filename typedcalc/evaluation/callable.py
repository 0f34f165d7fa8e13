"""Callable protocol.

Callables are invoked as call(frame, args, returns). `args`/`returns` are the
counts the call site requests, or None when it does not say. Fixed-arity
callables pop exactly `args` values from the frame's stack and push exactly
`returns` values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from typedcalc import CalcValue
from typedcalc.config import get_max_call_depth
from typedcalc.errors import CalcArityError, CalcRecursionError, CalcStackError
from typedcalc.evaluation.frame import Frame


class Callable(ABC):
    """Anything that can be invoked against a Frame."""

    @abstractmethod
    def call(self, frame: Frame, args: Optional[int] = None, returns: Optional[int] = None) -> None:
        ...

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        return f"<builtin {self.kind}>"


class FixedCallable(Callable):
    """Callable with a declared number of inputs and outputs."""

    def __init__(self, args: int, returns: int):
        self.args = args
        self.returns = returns

    def check_arity(self, args: Optional[int], returns: Optional[int]) -> None:
        if args is not None and args != self.args:
            raise CalcArityError(f"{self.kind} expects {self.args} argument(s), got {args}")
        if returns is not None and returns != self.returns:
            raise CalcArityError(f"{self.kind} returns {self.returns} value(s), requested {returns}")

    def call(self, frame: Frame, args: Optional[int] = None, returns: Optional[int] = None) -> None:
        self.check_arity(args, returns)
        stack = frame.stack
        before = stack.size()
        if before < self.args:
            raise CalcStackError(
                f"{self.kind} needs {self.args} argument(s) on the stack, found {before}"
            )
        self.invoke(frame)
        expected = before - self.args + self.returns
        if stack.size() != expected:
            raise CalcStackError(
                f"{self.kind} broke its stack contract: expected {expected} values, found {stack.size()}"
            )

    @abstractmethod
    def invoke(self, frame: Frame) -> None:
        """Pop `self.args` values and push `self.returns` values."""


class UnaryFunction(FixedCallable):
    def __init__(self):
        super().__init__(1, 1)

    def invoke(self, frame: Frame) -> None:
        value = frame.stack.pop()
        frame.stack.push(self.apply(value))

    @abstractmethod
    def apply(self, value: CalcValue) -> CalcValue:
        ...


class BinaryFunction(FixedCallable):
    def __init__(self):
        super().__init__(2, 1)

    def invoke(self, frame: Frame) -> None:
        right = frame.stack.pop()
        left = frame.stack.pop()
        frame.stack.push(self.apply(left, right))

    @abstractmethod
    def apply(self, left: CalcValue, right: CalcValue) -> CalcValue:
        ...


def check_call_depth(caller: Frame) -> None:
    """Fail before a frame nested under `caller` would pass the configured limit."""
    limit = get_max_call_depth()
    if caller.depth + 1 > limit:
        raise CalcRecursionError(f"Maximum call depth {limit} exceeded")
