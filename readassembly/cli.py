"""Command line entry point running the assembly pipeline on files in a directory."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from readassembly.assemble import Method, assemble_reads
from readassembly.fileio import read_reads, read_reference, write_text

REFERENCE_FILE = "reference.txt"
READS_FILE = "reads.txt"


def run_pipeline(method: Method | str, max_err: int, directory: str | Path = ".") -> Path:
    """Assemble the reads of ``directory`` and return the path of the result file.

    Also writes the timing report next to it.
    """
    method = Method(method)
    directory = Path(directory)
    reference = read_reference(directory / REFERENCE_FILE)
    reads = read_reads(directory / READS_FILE)
    assembled, timings = assemble_reads(reference, reads, max_err, method)
    try:
        timings.write(directory / method.timing_name)
    except OSError as exc:
        if not method.uses_index:
            raise OSError("Failed to open timing file.") from exc
    out_path = directory / method.output_name
    write_text(out_path, assembled)
    return out_path


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="readassembly", description="Assemble reads against a reference."
    )
    parser.add_argument(
        "--method",
        choices=[method.value for method in Method],
        default=Method.PAIR.value,
        help="how reads are located (default: %(default)s)",
    )
    parser.add_argument(
        "--directory", default=".", help="directory holding the input and output files"
    )
    parser.add_argument("max_err", nargs="?", help="maximum number of mismatches")
    return parser.parse_args(argv)


def _read_max_err(token: str | None) -> int | None:
    if token is None:
        try:
            token = input("Enter max mismatch (D): ")
        except EOFError:
            return None
    try:
        value = int(token.strip())
    except ValueError:
        return None
    return value if value >= 0 else None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pipeline; return 0 on success and 1 on any error."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    max_err = _read_max_err(args.max_err)
    if max_err is None:
        print("Invalid integer.", file=sys.stderr)
        return 1
    try:
        out_path = run_pipeline(args.method, max_err, args.directory)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Assembly finished. Output: {out_path}")
    return 0