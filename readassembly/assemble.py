"""Mapping reads onto a reference and assembling them into one sequence."""

from __future__ import annotations

import os
import time
from collections import Counter
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from readassembly.byte_fm import ByteFMIndex
from readassembly.fileio import write_text
from readassembly.linear import brute_force_locate
from readassembly.nibble_fm import NibbleFMIndex
from readassembly.pair_fm import PairFMIndex


class Method(str, Enum):
    """The way reads are located; the value prefixes the output file names."""

    PAIR = "2fmindex"
    NIBBLE = "cfmindex"
    BYTE = "fmindex"
    LINEAR = "linear"

    @property
    def uses_index(self) -> bool:
        return self is not Method.LINEAR

    @property
    def uses_consensus(self) -> bool:
        return self in (Method.PAIR, Method.NIBBLE)

    @property
    def output_name(self) -> str:
        return f"{self.value}_assembled.txt"

    @property
    def timing_name(self) -> str:
        return f"{self.value}_timing.txt"


@dataclass(frozen=True)
class Timings:
    """Durations in whole milliseconds of the steps of one assembly run."""

    build_ms: int | None
    map_ms: int
    assembly_ms: int
    consensus: bool = True

    @property
    def total_ms(self) -> int:
        return (self.build_ms or 0) + self.map_ms + self.assembly_ms

    def lines(self) -> list[str]:
        """Return the report lines, each ending with a newline."""
        lines = []
        if self.build_ms is not None:
            lines.append(f"FM-index build time     : {self.build_ms} ms\n")
        lines.append(f"Read mapping time       : {self.map_ms} ms\n")
        label = "Consensus assembly time : " if self.consensus else "Assembly time           : "
        lines.append(f"{label}{self.assembly_ms} ms\n")
        lines.append(f"Total pipeline time     : {self.total_ms} ms\n")
        return lines

    def write(self, path: str | os.PathLike[str]) -> None:
        """Write the timing report to ``path``."""
        write_text(path, "".join(self.lines()))


def consensus(
    reference_length: int, reads: Sequence[str], positions: Sequence[Sequence[int]]
) -> str:
    """Build a sequence by majority vote of the reads placed at their positions.

    Ties go to the character with the lowest code; positions no read covers are ``N``.
    Placements running past the end are ignored.
    """
    votes: list[Counter[str]] = [Counter() for _ in range(reference_length)]
    for read, starts in zip(reads, positions):
        for start in starts:
            if start < 0 or start + len(read) > reference_length:
                continue
            for offset, char in enumerate(read, start):
                votes[offset][char] += 1
    return "".join(
        min(counts.items(), key=lambda item: (-item[1], ord(item[0])))[0] if counts else "N"
        for counts in votes
    )


def overlay(
    reference_length: int, reads: Sequence[str], positions: Sequence[Sequence[int]]
) -> str:
    """Build a sequence by writing each read over its positions, later reads winning.

    Positions no read covers are ``N``; placements out of range are ignored.
    """
    assembled = ["N"] * reference_length
    for read, starts in zip(reads, positions):
        for start in starts:
            if start < 0 or start + len(read) > reference_length:
                continue
            assembled[start : start + len(read)] = read
    return "".join(assembled)


def _elapsed_ms(start: float, end: float) -> int:
    return int((end - start) * 1000)


def assemble_reads(
    reference: str,
    reads: Sequence[str],
    max_err: int,
    method: Method | str = Method.PAIR,
) -> tuple[str, Timings]:
    """Locate every read in ``reference`` and assemble them.

    Returns the assembled sequence, as long as the reference, and the timings.
    """
    method = Method(method)
    locate: Callable[[str, int], list[int]]
    build_ms: int | None = None
    if method.uses_index:
        index_class = {
            Method.PAIR: PairFMIndex,
            Method.NIBBLE: NibbleFMIndex,
            Method.BYTE: ByteFMIndex,
        }[method]
        build_start = time.perf_counter()
        index = index_class(reference)
        build_ms = _elapsed_ms(build_start, time.perf_counter())
        locate = index.locate
    else:
        def locate(pattern: str, errors: int) -> list[int]:
            return brute_force_locate(reference, pattern, errors)

    map_start = time.perf_counter()
    positions = [locate(read, max_err) for read in reads]
    map_end = time.perf_counter()

    if method is Method.BYTE:
        reference_length = len(reference.encode("utf-8"))
    else:
        reference_length = len(reference)
    build = consensus if method.uses_consensus else overlay
    assembled = build(reference_length, reads, positions)
    assembly_ms = _elapsed_ms(map_end, time.perf_counter())

    timings = Timings(
        build_ms=build_ms,
        map_ms=_elapsed_ms(map_start, map_end),
        assembly_ms=assembly_ms,
        consensus=method.uses_consensus,
    )
    return assembled, timings