from __future__ import annotations

from pydantic import BaseModel, Field

from boolfuck.vm import Runtime


class RunReport(BaseModel):
    instructions: int = Field(ge=0)
    steps: int = Field(ge=0)
    bits_read: int = Field(ge=0)
    bits_written: int = Field(ge=0)
    output_hex: str = ""
    output_text: str = ""

    @classmethod
    def from_runtime(cls, runtime: Runtime) -> RunReport:
        out = runtime.output
        return cls(
            instructions=len(runtime.program),
            steps=runtime.steps,
            bits_read=runtime.bits_read,
            bits_written=runtime.bits_written,
            output_hex=out.hex(),
            output_text=out.decode("utf-8", errors="replace"),
        )
