"""Global environment: type domain, global scope, built-ins and the compile/execute entry points."""

from __future__ import annotations

import logging
from typing import Any, Optional

from typedcalc import CalcValue
from typedcalc.compiler.code import Code
from typedcalc.compiler.delay_compiler import SYMBOL_DELAY, DelayExpressionCompiler
from typedcalc.compiler.lambda_compiler import SYMBOL_CLOSURE, LambdaExpressionCompiler
from typedcalc.compiler.nodes import ExprNode
from typedcalc.errors import CalcInvalidSymbol
from typedcalc.evaluation.callable import Callable
from typedcalc.evaluation.closure import ClosureSymbol
from typedcalc.evaluation.frame import Frame
from typedcalc.evaluation.promise import DelaySymbol, ForceSymbol, IsPromiseSymbol
from typedcalc.types.domain import TypeDomain, TypedValue
from typedcalc.types.scope import Scope

logger = logging.getLogger(__name__)


class Environment:
    """A type domain plus the global scope code runs against."""

    def __init__(self, domain: Optional[TypeDomain] = None):
        self.domain = domain if domain is not None else TypeDomain.default()
        self.global_scope = Scope()
        self.lambda_compiler = LambdaExpressionCompiler(self.domain, self.null_value, SYMBOL_CLOSURE)
        self.delay_compiler = DelayExpressionCompiler(self.domain, SYMBOL_DELAY)

    @property
    def null_value(self) -> CalcValue:
        return self.domain.null_value

    def set_global_symbol(self, name: str, binding: Any) -> None:
        """Install a Callable or a TypedValue under `name` in the global scope."""
        if not isinstance(binding, (Callable, TypedValue)):
            raise CalcInvalidSymbol(
                f"Global symbol '{name}' must be bound to a callable or typed value, got {binding!r}"
            )
        self.global_scope.put(name, binding)

    def get_global_symbol(self, name: str) -> Any:
        return self.global_scope.get(name)

    def value(self, payload: Any) -> CalcValue:
        return self.domain.wrap(payload)

    def compile(self, node: ExprNode) -> Code:
        return Code.flatten(node)

    def quote(self, node: ExprNode) -> CalcValue:
        return Code.flatten_and_wrap(self.domain, node)

    def execute(self, code: Code) -> list[CalcValue]:
        """Run `code` on a fresh top-level frame and return the final stack, bottom first."""
        frame = Frame.new_top_frame(self.global_scope)
        logger.debug("executing %d step(s)", len(code))
        code.execute(frame)
        return list(frame.stack)

    def evaluate(self, node: ExprNode) -> list[CalcValue]:
        return self.execute(self.compile(node))


def register(env: Environment) -> None:
    """Register the closure and promise built-ins into the given environment."""
    env.set_global_symbol(SYMBOL_CLOSURE, ClosureSymbol(env.domain))
    env.set_global_symbol(SYMBOL_DELAY, DelaySymbol())
    env.set_global_symbol("force", ForceSymbol())
    env.set_global_symbol("ispromise", IsPromiseSymbol())


def create_environment(domain: Optional[TypeDomain] = None) -> Environment:
    env = Environment(domain)
    register(env)
    return env
