"""Lowering of `params -> body` into a call of the `closure` built-in.

The emitted sequence is:
  push <cons list of parameter symbols, or null>
  push <body as quoted code>   (a raw code body is inlined as-is)
  call closure(2 args, 1 result)

Parameter specs are validated while the node is built, so a malformed lambda
fails at compile time rather than when it is called.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from typedcalc import CalcValue
from typedcalc.compiler.code import Code
from typedcalc.compiler.executables import Executable, SymbolCall, Value
from typedcalc.compiler.nodes import (
    BracketContainerNode,
    ExprNode,
    RawCodeExprNode,
    SymbolGetNode,
    ValueNode,
)
from typedcalc.errors import CalcSyntaxError
from typedcalc.types.cons import Cons
from typedcalc.types.domain import TypeDomain
from typedcalc.types.symbol import Symbol

SYMBOL_CLOSURE = "closure"


def arg_name(node: ExprNode) -> Optional[str]:
    if isinstance(node, SymbolGetNode):
        return node.symbol
    if isinstance(node, ValueNode):
        value = node.value
        if value.is_(Symbol):
            return value.unwrap(Symbol).value
        if value.is_(str):
            return value.unwrap(str)
    return None


class LambdaExpr(ExprNode):
    def __init__(self, compiler: LambdaExpressionCompiler, arg_names: ExprNode, code: ExprNode):
        self.compiler = compiler
        self.arg_names = arg_names
        self.code = code
        self.arg_list: CalcValue = self._extract_arg_names_list()

    def _extract_arg_names_list(self) -> CalcValue:
        if isinstance(self.arg_names, ValueNode) and self.arg_names.value is self.compiler.null_value:
            nodes = ()
        # any bracket type groups parameters
        elif isinstance(self.arg_names, BracketContainerNode):
            nodes = self.arg_names.children
        else:
            nodes = (self.arg_names,)

        names: list[str] = []
        for node in nodes:
            name = arg_name(node)
            if name is None:
                raise CalcSyntaxError(
                    f"expected symbol or list of symbols on left side of lambda, got {self.arg_names!r}"
                )
            if name in names:
                raise CalcSyntaxError(f"duplicate lambda parameter '{name}'")
            names.append(name)

        domain = self.compiler.domain
        return Cons.from_values(
            domain,
            (domain.create(Symbol, Symbol.get(name)) for name in names),
            self.compiler.null_value,
        )

    def flatten(self, output: List[Executable]) -> None:
        output.append(Value(self.arg_list))
        if isinstance(self.code, RawCodeExprNode):
            self.code.flatten(output)
        else:
            output.append(Value(Code.flatten_and_wrap(self.compiler.domain, self.code)))
        output.append(SymbolCall(self.compiler.closure_symbol, 2, 1))

    @property
    def children(self) -> Sequence[ExprNode]:
        return (self.arg_names, self.code)

    def __repr__(self) -> str:
        return f"LambdaExpr({self.arg_names!r} -> {self.code!r})"


class LambdaExpressionCompiler:
    """Builds lambda nodes from the two operands of the `->` operator."""

    def __init__(self, domain: TypeDomain, null_value: Optional[CalcValue] = None,
                 closure_symbol: str = SYMBOL_CLOSURE):
        self.domain = domain
        self.null_value = null_value if null_value is not None else domain.null_value
        self.closure_symbol = closure_symbol

    def create(self, arg_names: ExprNode, code: ExprNode) -> LambdaExpr:
        return LambdaExpr(self, arg_names, code)
