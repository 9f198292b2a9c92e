import argparse
import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from extraction.emitter import CsvEmitter
from extraction.extractor import extract_line
from extraction.rules import EXTRACTOR_RULES
from extraction.types import ExtractorRule


INPUT_ENCODING = "utf-8"


# ---------------- CLI ----------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="log2csv",
        description="Extract dates, IP addresses and emails from a log file as CSV",
    )
    parser.add_argument(
        "-i",
        dest="input",
        default="",
        metavar="path",
        help="Input file path (required)",
    )
    return parser


# ---------------- Helpers ----------------

def strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def scan(
    lines: Iterable[str],
    emitter: CsvEmitter,
    rules: Sequence[ExtractorRule] = EXTRACTOR_RULES,
):
    for line in lines:
        extracted = extract_line(strip_line_ending(line), rules)
        if extracted is None:
            continue

        emitter.write_row(extracted)


# ---------------- Run ----------------

def run(
    input_path: str,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """
    Open the input, write the header, then one row per matching line.

    Returns the process exit status. Rows written before a read error
    are kept and flushed.
    """
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr

    # newline="\n": split on \n only, a lone \r stays inside the line
    try:
        f = open(
            input_path,
            encoding=INPUT_ENCODING,
            errors="replace",
            newline="\n",
        )
    except OSError as e:
        print(f"Error opening input file: {e}", file=err)
        return 1

    emitter = CsvEmitter(out)
    status = 0

    try:
        with f:
            emitter.write_header()
            try:
                scan(f, emitter)
            except OSError as e:
                print(f"Error reading input file: {e}", file=err)
                status = 1
    finally:
        emitter.flush()

    return status


# ---------------- Main ----------------

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.input:
        print("Error: Input file path is required.", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    return run(args.input)


if __name__ == "__main__":
    sys.exit(main())
