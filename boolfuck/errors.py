from __future__ import annotations


class CompileError(Exception):
    """Raised for source that cannot be compiled, such as an unmatched bracket."""

    def __init__(self, message: str, *, line: int | None = None, col: int | None = None) -> None:
        self.line = line
        self.col = col
        prefix = ""
        if line is not None and col is not None:
            prefix = f"line {line} col {col}: "
        super().__init__(prefix + str(message))


class VMError(Exception):
    pass


class InputExhaustedError(VMError):
    """Raised when a read instruction runs past the last input bit."""

    def __init__(self, *, ip: int, bits_read: int) -> None:
        self.ip = ip
        self.bits_read = bits_read
        super().__init__(f"input exhausted at instruction {ip} after {bits_read} bits")
