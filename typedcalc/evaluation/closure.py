"""User-defined functions: a Code body closed over the scope it was created in."""

from __future__ import annotations

import logging
from io import StringIO

from typedcalc.compiler.code import Code
from typedcalc.errors import CalcArityError, CalcTypeError
from typedcalc.evaluation.callable import Callable, FixedCallable, check_call_depth
from typedcalc.evaluation.frame import Frame
from typedcalc.types.cons import Cons
from typedcalc.types.domain import TypeDomain
from typedcalc.types.scope import Scope
from typedcalc.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Closure(FixedCallable):
    """Takes one argument per parameter name and returns exactly one value."""

    def __init__(self, scope: Scope, code: Code, params: list[str]):
        super().__init__(len(params), 1)
        self.scope = scope
        self.code = code
        self.params: tuple[str, ...] = tuple(params)

    def invoke(self, frame: Frame) -> None:
        check_call_depth(frame)
        # pop_n keeps push order, which is declaration order
        values = frame.stack.pop_n(len(self.params))

        local = Frame.new_local_frame(self.scope, caller=frame)
        for name, value in zip(self.params, values):
            local.scope.put(name, value)

        self.code.execute(local)

        results = local.stack
        if results.size() != 1:
            raise CalcArityError(
                f"closure body must leave exactly one result, got {results.size()}"
            )
        frame.stack.push(results.pop())

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<closure (")
            buffer.write(" ".join(self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


def arg_names(domain: TypeDomain, value) -> list[str]:
    """Ordered parameter names from a cons list of symbols or the null value."""
    if value is domain.null_value:
        return []
    if not value.is_(Cons):
        raise CalcTypeError(
            f"Expected list of symbols as first argument of 'closure', got {value.type_name}: {value}"
        )
    names: list[str] = []
    for element, _ in value.unwrap(Cons).linear():
        names.append(element.as_(Symbol, "lambda args list element").value)
    terminator = value.unwrap(Cons).terminator()
    if terminator is not domain.null_value:
        raise CalcTypeError(f"Expected null-terminated list of symbols, got terminator {terminator}")
    return names


class ClosureSymbol(FixedCallable):
    """Built-in `closure`: (arg names, code) -> closure over the calling frame's scope."""

    def __init__(self, domain: TypeDomain):
        super().__init__(2, 1)
        self.domain = domain

    def invoke(self, frame: Frame) -> None:
        stack = frame.stack
        code = stack.pop().as_(Code, "second argument of 'closure'")
        names = arg_names(self.domain, stack.pop())
        closure = Closure(frame.scope, code, names)
        logger.debug("created %s", closure)
        stack.push(self.domain.create(Callable, closure))
