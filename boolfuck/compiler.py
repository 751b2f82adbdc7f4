from __future__ import annotations

import logging

from boolfuck.bytecode import Instruction, Op, Program
from boolfuck.errors import CompileError

logger = logging.getLogger(__name__)

_SIMPLE_OPS: dict[str, Op] = {
    ">": Op.MOVE_RIGHT,
    "<": Op.MOVE_LEFT,
    "+": Op.FLIP,
    ";": Op.WRITE,
    ",": Op.READ,
}


def compile_program(src: str) -> Program:
    """Translate Boolfuck source into a flat program with resolved jumps.

    Characters outside ``><+;,[]`` are skipped. Bracket pairs are matched in a
    single pass: ``[`` emits a placeholder that ``]`` patches once its own index
    is known, so each jump targets its partner.
    """
    instructions: list[Instruction] = []
    # (emission index, line, col) of each pending "["
    open_brackets: list[tuple[int, int, int]] = []
    line, col = 1, 0

    for ch in src:
        if ch == "\n":
            line, col = line + 1, 0
            continue
        col += 1

        op = _SIMPLE_OPS.get(ch)
        if op is not None:
            instructions.append(Instruction(op))
        elif ch == "[":
            open_brackets.append((len(instructions), line, col))
            instructions.append(Instruction(Op.JUMP_IF_ZERO))
        elif ch == "]":
            if not open_brackets:
                raise CompileError("unmatched ']'", line=line, col=col)
            start, _, _ = open_brackets.pop()
            end = len(instructions)
            instructions[start] = Instruction(Op.JUMP_IF_ZERO, end)
            instructions.append(Instruction(Op.JUMP_IF_ONE, start))

    if open_brackets:
        _, open_line, open_col = open_brackets[0]
        raise CompileError("unmatched '['", line=open_line, col=open_col)

    logger.debug("compiled %d chars into %d instructions", len(src), len(instructions))
    return Program(instructions=tuple(instructions))
