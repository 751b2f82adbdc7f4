from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from boolfuck.compiler import compile_program
from boolfuck.config import LOG_LEVELS, Settings, load_settings
from boolfuck.errors import CompileError, VMError
from boolfuck.schemas import RunReport
from boolfuck.vm import Runtime

logger = logging.getLogger(__name__)


def _existing_path(value: str) -> Path:
    p = Path(value)
    if not p.is_file():
        raise argparse.ArgumentTypeError(f"path not found: {value}")
    return p


def _read_source(path: Path, *, settings: Settings) -> str:
    logger.info("reading program %s", path)
    try:
        return path.read_text(encoding=settings.source_encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise CompileError(f"cannot decode {path} as {settings.source_encoding}: {exc}") from exc


def _read_input(args: argparse.Namespace) -> bytes:
    if args.input_file is not None:
        logger.info("reading input %s", args.input_file)
        return args.input_file.read_bytes()
    if args.input is not None:
        return args.input.encode("utf-8")
    return b""


def _cmd_run(args: argparse.Namespace, *, settings: Settings) -> int:
    program = compile_program(_read_source(args.program, settings=settings))
    runtime = Runtime(program, _read_input(args))
    output = runtime.run()

    if args.json:
        print(RunReport.from_runtime(runtime).model_dump_json(indent=2))
        return 0
    sys.stdout.buffer.write(output)
    sys.stdout.buffer.flush()
    return 0


def _cmd_disasm(args: argparse.Namespace, *, settings: Settings) -> int:
    program = compile_program(_read_source(args.program, settings=settings))
    for line in program.disassemble():
        print(line)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="boolfuck")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="logging level (default: BOOLFUCK_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    run_p = sub.add_parser("run", help="compile and execute a program")
    run_p.add_argument("program", type=_existing_path)
    src_g = run_p.add_mutually_exclusive_group()
    src_g.add_argument("--input", type=str, default=None, help="input text (UTF-8 encoded)")
    src_g.add_argument(
        "--input-file", type=_existing_path, default=None, help="file whose bytes are the input"
    )
    run_p.add_argument(
        "--json", action="store_true", help="print a JSON run report instead of raw output"
    )

    disasm_p = sub.add_parser("disasm", help="print the compiled instruction listing")
    disasm_p.add_argument("program", type=_existing_path)

    args = parser.parse_args(argv)
    try:
        settings = load_settings(log_level=args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.cmd == "run":
            return _cmd_run(args, settings=settings)
        if args.cmd == "disasm":
            return _cmd_disasm(args, settings=settings)
    except (CompileError, VMError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    raise AssertionError(f"unhandled cmd: {args.cmd}")
