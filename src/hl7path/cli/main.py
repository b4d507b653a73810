"""Command-line query tool for hl7path.

Run directly:
    python -m hl7path.cli.main PID-5.2 --file message.hl7
    cat message.hl7 | hl7path PID-3[2].1 MSH-9.1 --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from hl7path.common.config import HL7PathConfig
from hl7path.common.errors import HL7PathError
from hl7path.extraction.abstractor import abstract_many

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 2

SAMPLE_MESSAGE = (
    "MSH|^~\\&|SendingApp|SendingFac|ReceivingApp|ReceivingFac|20240101120000||ADT^A01|123|P|2.5\r"
    "PID|1||PatientID||Doe^John"
)
SAMPLE_PATH = "PID-5.2"


def _build_parser(config: HL7PathConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hl7path",
        description="Extract values from an HL7 v2.x message by path",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hl7path PID-5.2 --file adt.hl7          # given name of the patient
  hl7path "OBX[2].5" MSH-9 --file oru.hl7  # several values, one per line
  hl7path                                 # run against a bundled sample
        """,
    )
    parser.add_argument(
        "paths", nargs="*", metavar="PATH",
        help="Path such as PID-3[2].5; omit to run the bundled sample",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--file", type=Path, default=None, help="Read the message from FILE")
    source.add_argument("--message", type=str, default=None, help="Message text")
    parser.add_argument(
        "--json", action="store_true",
        help="Print one JSON object mapping each path to its value",
    )
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=config.log_level,
        help=f"Logging level (default: {config.log_level})",
    )
    return parser


def _read_message(args: argparse.Namespace, config: HL7PathConfig, stdin: TextIO) -> str:
    if args.message is not None:
        return args.message
    if args.file is not None:
        # newline="" keeps \r segment terminators intact
        with args.file.open(encoding=config.encoding, newline="") as fh:
            message = fh.read()
    else:
        message = stdin.read()
    if config.strip_trailing_newline:
        message = message.removesuffix("\n").removesuffix("\r")
    return message


def run(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    config: HL7PathConfig | None = None,
) -> int:
    """Run the CLI and return its exit code."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    config = config or HL7PathConfig()

    args = _build_parser(config).parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.paths:
        try:
            message = _read_message(args, config, stdin)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: {e}", file=stderr)
            return EXIT_ERROR
        paths = args.paths
    else:
        logger.info("No path given, extracting %s from the sample message", SAMPLE_PATH)
        message = SAMPLE_MESSAGE
        paths = [SAMPLE_PATH]

    try:
        results = abstract_many(message, paths)
    except HL7PathError as e:
        print(f"Error: {e}", file=stderr)
        return EXIT_ERROR

    if args.json:
        print(json.dumps(results), file=stdout)
    elif args.paths:
        for path_text in paths:
            print(results[path_text], file=stdout)
    else:
        print(f"Result: {results[SAMPLE_PATH]}", file=stdout)
    return EXIT_OK


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
