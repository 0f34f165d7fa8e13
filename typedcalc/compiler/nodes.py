"""Expression-tree nodes produced by a front end and lowered into Code.

Every node implements flatten(output), appending executable steps to `output`
in evaluation order, and exposes its children for tree walks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Sequence

from typedcalc import CalcValue
from typedcalc.compiler.code import Code
from typedcalc.compiler.executables import Executable, SymbolCall, SymbolGet, Value


class ExprNode(ABC):
    @abstractmethod
    def flatten(self, output: List[Executable]) -> None:
        ...

    @property
    def children(self) -> Sequence[ExprNode]:
        return ()


class ValueNode(ExprNode):
    def __init__(self, value: CalcValue):
        self.value = value

    def flatten(self, output: List[Executable]) -> None:
        output.append(Value(self.value))

    def __repr__(self) -> str:
        return f"ValueNode({self.value})"


class SymbolGetNode(ExprNode):
    def __init__(self, symbol: str):
        self.symbol = symbol

    def flatten(self, output: List[Executable]) -> None:
        output.append(SymbolGet(self.symbol))

    def __repr__(self) -> str:
        return f"SymbolGetNode({self.symbol!r})"


class SymbolCallNode(ExprNode):
    """Call of a named symbol; arguments are evaluated left to right."""

    def __init__(self, symbol: str, args: Iterable[ExprNode], returns: int = 1):
        self.symbol = symbol
        self.args: tuple[ExprNode, ...] = tuple(args)
        self.returns = returns

    def flatten(self, output: List[Executable]) -> None:
        for arg in self.args:
            arg.flatten(output)
        output.append(SymbolCall(self.symbol, len(self.args), self.returns))

    @property
    def children(self) -> Sequence[ExprNode]:
        return self.args

    def __repr__(self) -> str:
        return f"SymbolCallNode({self.symbol!r}, {list(self.args)!r})"


class BracketContainerNode(ExprNode):
    """A parenthesised or bracketed group; flattens its children in order."""

    def __init__(self, children: Iterable[ExprNode]):
        self._children: tuple[ExprNode, ...] = tuple(children)

    def flatten(self, output: List[Executable]) -> None:
        for child in self._children:
            child.flatten(output)

    @property
    def children(self) -> Sequence[ExprNode]:
        return self._children

    def __repr__(self) -> str:
        return f"BracketContainerNode({list(self._children)!r})"


class RawCodeExprNode(ExprNode):
    """A subtree written as literal code: flattens to a push of its quoted form."""

    def __init__(self, domain, body: ExprNode):
        self.domain = domain
        self.body = body

    def flatten(self, output: List[Executable]) -> None:
        output.append(Value(Code.flatten_and_wrap(self.domain, self.body)))

    @property
    def children(self) -> Sequence[ExprNode]:
        return (self.body,)

    def __repr__(self) -> str:
        return f"RawCodeExprNode({self.body!r})"
