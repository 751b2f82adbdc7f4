from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from boolfuck.compiler import compile_program
from boolfuck.schemas import RunReport
from boolfuck.vm import Runtime
from tests.programs import HELLO_WORLD


def test_report_from_runtime() -> None:
    rt = Runtime(compile_program(HELLO_WORLD))
    rt.run()
    report = RunReport.from_runtime(rt)
    assert report.instructions == len(rt.program)
    assert report.steps == len(rt.program)  # no loops
    assert report.bits_read == 0
    # The trailing newline leaves its top four bits unwritten.
    assert report.bits_written == 14 * 8 - 4
    assert report.output_text == "Hello, world!\n"
    assert bytes.fromhex(report.output_hex) == b"Hello, world!\n"


def test_report_json_round_trip() -> None:
    rt = Runtime(compile_program("+;"))
    rt.run()
    data = json.loads(RunReport.from_runtime(rt).model_dump_json())
    assert data["output_hex"] == "01"
    assert data["steps"] == 2


def test_report_rejects_negative_counts() -> None:
    with pytest.raises(ValidationError):
        RunReport(instructions=-1, steps=0, bits_read=0, bits_written=0)
