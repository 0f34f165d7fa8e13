"""Lazy, memoized computations: `delay`, `force` and `ispromise`."""

from __future__ import annotations

import logging

from typedcalc import CalcValue
from typedcalc.compiler.code import Code
from typedcalc.errors import CalcArityError
from typedcalc.evaluation.callable import Callable, FixedCallable, UnaryFunction, check_call_depth
from typedcalc.evaluation.frame import Frame
from typedcalc.types.scope import Scope

logger = logging.getLogger(__name__)

_UNRESOLVED = object()


class Promise(FixedCallable):
    """Zero-argument callable that runs its code once and then returns the stored result.

    Unresolved promises hold the scope and code they were created with; once
    resolved they drop both and keep only the value.
    """

    def __init__(self, scope: Scope, code: Code):
        super().__init__(0, 1)
        self.scope: Scope | None = scope
        self.code: Code | None = code
        self._value = _UNRESOLVED

    @property
    def resolved(self) -> bool:
        return self._value is not _UNRESOLVED

    def invoke(self, frame: Frame) -> None:
        if self._value is _UNRESOLVED:
            check_call_depth(frame)
            execution = Frame.new_local_frame(self.scope, caller=frame)
            self.code.execute(execution)

            results = execution.stack
            if results.size() != 1:
                raise CalcArityError(
                    f"promise body must leave exactly one result, got {results.size()}"
                )
            self._value = results.pop()
            self.scope = None
            self.code = None
            logger.debug("promise resolved to %s", self._value)

        frame.stack.push(self._value)

    def __str__(self) -> str:
        if self.resolved:
            return f"<promise = {self._value}>"
        return "<promise>"

    def __repr__(self) -> str:
        return str(self)


class DelaySymbol(FixedCallable):
    """Built-in `delay`: quoted code -> promise over the current scope."""

    def __init__(self):
        super().__init__(1, 1)

    def invoke(self, frame: Frame) -> None:
        stack = frame.stack
        arg = stack.pop()
        code = arg.as_(Code, "'code' argument")
        stack.push(arg.domain.create(Callable, Promise(frame.scope, code)))


class ForceSymbol(FixedCallable):
    """Built-in `force`: invoke any callable with no arguments for one result."""

    def __init__(self):
        super().__init__(1, 1)

    def invoke(self, frame: Frame) -> None:
        arg = frame.stack.pop()
        callable_ = arg.as_(Callable, "'force' argument")
        callable_.call(frame, 0, 1)


class IsPromiseSymbol(UnaryFunction):
    def apply(self, value: CalcValue) -> CalcValue:
        return value.domain.create(bool, value.is_(Callable) and isinstance(value.value, Promise))
