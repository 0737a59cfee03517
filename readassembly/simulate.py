"""Generation of random reference sequences and simulated, mutated reads."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterator, Sequence

from readassembly.fileio import read_reference, write_text

BASES = "ACGT"
REFERENCE_FILE = "reference.txt"
READS_FILE = "reads.txt"
MUTATED_FILE = "reference_mutated.txt"


def random_reference(length: int, rng: random.Random) -> str:
    """Return a uniformly random DNA sequence of ``length`` bases."""
    if length <= 0:
        raise ValueError("Invalid length.")
    return "".join(rng.choice(BASES) for _ in range(length))


def mutate_base(base: str, rng: random.Random) -> str:
    """Return a base chosen uniformly among the three that differ from ``base``.

    Anything other than A, C or G is treated as T.
    """
    index = {"A": 0, "C": 1, "G": 2}.get(base, 3)
    return BASES[(index + rng.randint(1, 3)) % 4]


def mutate_blocks(
    reference: str, read_len: int, max_mis: int, rng: random.Random
) -> str:
    """Mutate each full block of ``read_len`` bases at up to ``max_mis`` distinct positions."""
    if read_len <= 0:
        raise ValueError("Invalid length.")
    if max_mis < 0:
        raise ValueError("Invalid mismatch count.")
    max_mis = min(max_mis, read_len)
    mutated = list(reference)
    for block_start in range(0, len(mutated) - read_len + 1, read_len):
        count = rng.randint(0, max_mis)
        for pos in rng.sample(range(block_start, block_start + read_len), count):
            mutated[pos] = mutate_base(mutated[pos], rng)
    return "".join(mutated)


def sample_reads(
    sequence: str, read_len: int, repeat_cnt: int, rng: random.Random
) -> list[str]:
    """Cut ``sequence`` into consecutive reads, once per repeat from a random offset."""
    if read_len <= 0:
        raise ValueError("Invalid length.")
    reads = []
    for _ in range(repeat_cnt):
        start = rng.randint(0, read_len - 1)
        reads.extend(
            sequence[pos : pos + read_len]
            for pos in range(start, len(sequence) - read_len + 1, read_len)
        )
    return reads


def _ask_int(prompt: str, supplied: Iterator[str]) -> int | None:
    token = next(supplied, None)
    if token is None:
        try:
            token = input(prompt)
        except EOFError:
            return None
    try:
        return int(token.strip())
    except ValueError:
        return None


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def reference_main(argv: Sequence[str] | None = None) -> int:
    """Write a random reference sequence to ``reference.txt``."""
    supplied = iter(sys.argv[1:] if argv is None else argv)
    length = _ask_int("Enter DNA sequence length: ", supplied)
    if length is None or length <= 0:
        return _fail("Invalid length.")

    sequence = random_reference(length, random.Random())
    try:
        write_text(REFERENCE_FILE, sequence)
    except OSError:
        return _fail(f"File open error: {REFERENCE_FILE}")
    print("Done.")
    return 0


def reads_main(argv: Sequence[str] | None = None) -> int:
    """Mutate ``reference.txt`` and write simulated reads from the mutated copy."""
    supplied = iter(sys.argv[1:] if argv is None else argv)
    read_len = _ask_int("Enter read length: ", supplied)
    if read_len is None or read_len <= 0:
        return _fail("Invalid length.")
    repeat_cnt = _ask_int("Enter repeat count: ", supplied)
    if repeat_cnt is None or repeat_cnt <= 0:
        return _fail("Invalid repeat count.")
    max_mis = _ask_int("Enter max mismatches per read: ", supplied)
    if max_mis is None or max_mis < 0:
        return _fail("Invalid mismatch count.")
    max_mis = min(max_mis, read_len)

    try:
        reference = read_reference(REFERENCE_FILE).replace("\n", "")
    except OSError:
        return _fail(f"File open error: {REFERENCE_FILE}")
    if len(reference) < read_len:
        return _fail("Reference too short.")

    rng = random.Random()
    mutated = mutate_blocks(reference, read_len, max_mis, rng)
    try:
        write_text(MUTATED_FILE, mutated)
    except OSError:
        return _fail(f"File open error: {MUTATED_FILE}")

    reads = sample_reads(mutated, read_len, repeat_cnt, rng)
    try:
        write_text(READS_FILE, "".join(f"{read}," for read in reads))
    except OSError:
        return _fail(f"File open error: {READS_FILE}")
    print("Done.")
    return 0