from __future__ import annotations

# Public surface for the compiler package
from .executables import Executable, Value, SymbolGet, SymbolCall
from .code import Code
from .nodes import (
    ExprNode,
    ValueNode,
    SymbolGetNode,
    SymbolCallNode,
    BracketContainerNode,
    RawCodeExprNode,
)
from .lambda_compiler import LambdaExpressionCompiler, LambdaExpr
from .delay_compiler import DelayExpressionCompiler

__all__ = [
    "Executable",
    "Value",
    "SymbolGet",
    "SymbolCall",
    "Code",
    "ExprNode",
    "ValueNode",
    "SymbolGetNode",
    "SymbolCallNode",
    "BracketContainerNode",
    "RawCodeExprNode",
    "LambdaExpressionCompiler",
    "LambdaExpr",
    "DelayExpressionCompiler",
]
