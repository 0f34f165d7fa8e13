"""Lowering of `delay(expr)` into a call of the `delay` built-in with quoted code."""

from __future__ import annotations

from typing import Sequence

from typedcalc.compiler.code import Code
from typedcalc.compiler.nodes import ExprNode, SymbolCallNode, ValueNode
from typedcalc.errors import CalcSyntaxError
from typedcalc.types.domain import TypeDomain

SYMBOL_DELAY = "delay"


class DelayExpressionCompiler:
    def __init__(self, domain: TypeDomain, delay_symbol: str = SYMBOL_DELAY):
        self.domain = domain
        self.delay_symbol = delay_symbol

    def create(self, children: Sequence[ExprNode]) -> SymbolCallNode:
        if len(children) != 1:
            raise CalcSyntaxError(f"'delay' expects single argument, got {len(children)}")
        arg = ValueNode(Code.flatten_and_wrap(self.domain, children[0]))
        return SymbolCallNode(self.delay_symbol, [arg])
