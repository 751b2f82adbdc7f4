from __future__ import annotations

import logging

from boolfuck.bytecode import Instruction, Op, Program
from boolfuck.errors import InputExhaustedError
from boolfuck.tape import Tape

logger = logging.getLogger(__name__)

_LOW = 0b0000_0001
_HIGH = 0b1000_0000


class Runtime:
    """Executes a compiled program against a fresh tape.

    Input bits are consumed least-significant first within each byte, and
    output bits are packed the same way: the output mask starts parked on
    the high bit so the first write opens a new byte.
    """

    def __init__(self, program: Program, data: bytes = b"") -> None:
        self.program = program
        self.tape = Tape()
        self.ip = 0
        self.steps = 0
        self.bits_read = 0
        self.bits_written = 0
        self._input = bytes(data)
        self._input_pos = 0
        self._input_mask = _LOW
        self._output = bytearray()
        self._output_mask = _HIGH

    @property
    def halted(self) -> bool:
        return self.ip >= len(self.program)

    @property
    def output(self) -> bytes:
        return bytes(self._output)

    def step(self) -> Instruction | None:
        """Execute one instruction; return it, or None once the program has ended."""
        if self.halted:
            return None

        ins = self.program[self.ip]
        op = ins.op
        tape = self.tape
        if op is Op.FLIP:
            tape.flip_bit()
        elif op is Op.MOVE_RIGHT:
            tape.move_right()
        elif op is Op.MOVE_LEFT:
            tape.move_left()
        elif op is Op.JUMP_IF_ZERO:
            if not tape.read_bit():
                self.ip = ins.target
        elif op is Op.JUMP_IF_ONE:
            if tape.read_bit():
                self.ip = ins.target
        elif op is Op.READ:
            tape.set_bit(self._read_input_bit())
        elif op is Op.WRITE:
            self._write_output_bit(tape.read_bit())
        else:
            raise AssertionError(f"unhandled op: {op}")

        # A taken jump lands on its partner, which this increment then skips.
        self.ip += 1
        self.steps += 1
        return ins

    def run(self) -> bytes:
        logger.debug(
            "running %d instructions on %d input bytes", len(self.program), len(self._input)
        )
        while self.step() is not None:
            pass
        logger.debug(
            "halted after %d steps: read %d bits, wrote %d bits",
            self.steps,
            self.bits_read,
            self.bits_written,
        )
        return self.output

    def _read_input_bit(self) -> bool:
        if self._input_pos >= len(self._input):
            raise InputExhaustedError(ip=self.ip, bits_read=self.bits_read)
        bit = bool(self._input[self._input_pos] & self._input_mask)
        if self._input_mask == _HIGH:
            self._input_mask = _LOW
            self._input_pos += 1
        else:
            self._input_mask <<= 1
        self.bits_read += 1
        return bit

    def _write_output_bit(self, bit: bool) -> None:
        if self._output_mask == _HIGH:
            self._output.append(0)
            self._output_mask = _LOW
        else:
            self._output_mask <<= 1
        if bit:
            self._output[-1] |= self._output_mask
        self.bits_written += 1


def run_program(program: Program, data: bytes = b"") -> bytes:
    return Runtime(program, data).run()
