from __future__ import annotations

from boolfuck.bytecode import Program
from boolfuck.compiler import compile_program
from boolfuck.vm import run_program


def compile_source(*, src: str) -> Program:
    return compile_program(src)


def run_source(*, src: str, data: bytes = b"") -> bytes:
    program = compile_source(src=src)
    return run_program(program, data)


def run(source: str, data: bytes = b"") -> bytes:
    """Compile ``source`` and execute it over ``data``, returning the output bytes."""
    return run_source(src=source, data=data)
