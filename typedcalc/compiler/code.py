from __future__ import annotations

from typing import Iterable, Iterator

from typedcalc import CalcValue
from typedcalc.compiler.executables import Executable
from typedcalc.evaluation.frame import Frame


class Code:
    """Immutable, repeatably runnable sequence of executable steps."""

    __slots__ = ("steps",)

    def __init__(self, steps: Iterable[Executable]):
        self.steps: tuple[Executable, ...] = tuple(steps)

    @classmethod
    def flatten(cls, node) -> Code:
        output: list[Executable] = []
        node.flatten(output)
        return cls(output)

    @classmethod
    def flatten_and_wrap(cls, domain, node) -> CalcValue:
        """Compile `node` and quote the result as a code-typed value."""
        return domain.create(cls, cls.flatten(node))

    def execute(self, frame: Frame) -> None:
        for step in self.steps:
            step.execute(frame)

    def __iter__(self) -> Iterator[Executable]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __repr__(self) -> str:
        return f"Code({list(self.steps)!r})"
