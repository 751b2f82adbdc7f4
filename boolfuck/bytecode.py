from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class Op(str, Enum):
    READ = "read"
    FLIP = "flip"
    JUMP_IF_ZERO = "jz"
    JUMP_IF_ONE = "jnz"
    WRITE = "write"
    MOVE_RIGHT = "right"
    MOVE_LEFT = "left"


@dataclass(frozen=True, slots=True)
class Instruction:
    op: Op
    target: int | None = None

    def __str__(self) -> str:
        if self.target is None:
            return self.op.value
        return f"{self.op.value} {self.target}"


@dataclass(frozen=True, slots=True)
class Program:
    instructions: tuple[Instruction, ...]

    def __len__(self) -> int:
        return len(self.instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def disassemble(self) -> list[str]:
        width = len(str(max(len(self.instructions) - 1, 0)))
        return [f"{i:>{width}} {ins}" for i, ins in enumerate(self.instructions)]
