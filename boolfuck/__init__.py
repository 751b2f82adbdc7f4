from __future__ import annotations

from boolfuck.api import compile_source, run, run_source
from boolfuck.bytecode import Instruction, Op, Program
from boolfuck.compiler import compile_program
from boolfuck.errors import CompileError, InputExhaustedError, VMError
from boolfuck.tape import Tape
from boolfuck.vm import Runtime, run_program

__all__ = [
    "__version__",
    # Entry points
    "run",
    "run_source",
    "compile_source",
    # Pipeline
    "compile_program",
    "run_program",
    "Runtime",
    "Tape",
    # Bytecode
    "Op",
    "Instruction",
    "Program",
    # Errors
    "CompileError",
    "VMError",
    "InputExhaustedError",
]

__version__ = "0.1.0"
