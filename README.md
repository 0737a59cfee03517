# readassembly

Reference-guided assembly of short DNA reads. Each read is mapped onto a
reference sequence, allowing up to a chosen number of mismatches, and the
mapped reads are combined into an assembled sequence of the same length as the
reference. Positions that no read covers come out as `N`.

Four ways of mapping reads are included, so that they can be compared. They are
named by `readassembly.assemble.Method`:

| `Method`  | value      | mapping                                                     | assembly  |
|-----------|------------|-------------------------------------------------------------|-----------|
| `PAIR`    | `2fmindex` | FM-index over base pairs packed into one byte (`readassembly.pair_fm.PairFMIndex`) | consensus |
| `NIBBLE`  | `cfmindex` | FM-index over 4-bit base codes (`readassembly.nibble_fm.NibbleFMIndex`)            | consensus |
| `BYTE`    | `fmindex`  | FM-index over plain bytes (`readassembly.byte_fm.ByteFMIndex`)                     | overlay   |
| `LINEAR`  | `linear`   | scan of every offset (`readassembly.linear.brute_force_locate`)                    | overlay   |

Consensus takes a majority vote at each position (ties go to the character with
the lowest code); overlay writes each mapped read in turn, later reads winning.

Things to know about the indexes:

- `PairFMIndex` searches whole base pairs: hits always start at even offsets,
  a mismatch counts once per differing pair, and the last base of an
  odd-length pattern is ignored. It accepts only `A`, `C`, `G`, `T`.
- `NibbleFMIndex` counts mismatches per base. It accepts `A`, `C`, `G`, `T`.
- `ByteFMIndex` works on any text or bytes; its end-of-text sentinel (byte 0)
  takes part in the search like any other symbol.

## Installation

```
pip install .
```

The package needs nothing beyond the Python standard library (3.10 or later).

## Generating test data

Two commands produce a random data set in the current directory. Each asks for
its values, or takes them as command-line arguments in the same order.

```
readassembly-reference [LENGTH]
```

writes a random `A`/`C`/`G`/`T` sequence of the given length to
`reference.txt`.

```
readassembly-reads [READ_LEN [REPEAT_COUNT [MAX_MISMATCHES]]]
```

reads `reference.txt` (line breaks removed), mutates each full read-length
block at up to the given number of distinct positions, writes the mutated
sequence to `reference_mutated.txt`, and writes reads cut from the mutated
sequence — once per repeat, starting from a random offset — to `reads.txt` as
one line, each read followed by a comma.

## Assembling

```
readassembly [--method {2fmindex,cfmindex,fmindex,linear}] [--directory DIR] [MAX_ERR]
```

reads `reference.txt` and `reads.txt` from the directory (default: the current
one), asks for the largest number of mismatches if `MAX_ERR` is not given, and
writes `<method>_assembled.txt` and a timing report `<method>_timing.txt`
there. The default method is `2fmindex`. The command exits with status 1 on an
invalid mismatch count or on any file error. The same run is available as
`readassembly.cli.run_pipeline(method, max_err, directory)`, which returns the
path of the assembled file.

## Input formats

- The reference file is read whole, as it is.
- The reads file holds reads separated by commas on its first line. A trailing
  comma gives a final empty read. An empty reads file is an error.

## Using the library

```python
from readassembly.fileio import read_reference, read_reads, write_text
from readassembly.linear import brute_force_locate
from readassembly.pair_fm import PairFMIndex
from readassembly.assemble import Method, assemble_reads

print(brute_force_locate("ACGTACGT", "ACGT", 0))   # [0, 4]
print(PairFMIndex("ACGTACGT").locate("ACGT", 0))   # [0, 4]

reference = read_reference("reference.txt")
reads = read_reads("reads.txt")
for method in Method:
    assembled, timings = assemble_reads(reference, reads, 1, method)
    write_text(method.output_name, assembled)
    timings.write(method.timing_name)
```

`assemble_reads` returns the assembled sequence and a `Timings` record holding
the index build, mapping and assembly times in whole milliseconds
(`build_ms` is `None` for the linear scan) and their `total_ms`. The
`consensus` and `overlay` functions in `readassembly.assemble` can be used on
their own with positions from any source.

Base encodings used by the packed indexes are available on their own in
`readassembly.paircode` and `readassembly.nibblecode`, and random data
generation in `readassembly.simulate` (`random_reference`, `mutate_base`,
`mutate_blocks`, `sample_reads`), each taking a `random.Random` for
reproducible runs.

## What it does not do

Everything is held in memory: indexes are rebuilt on every run and are not
saved. Inputs are plain text files as described above; FASTA, FASTQ and other
sequence formats are not read.

## Running the tests

```
pip install ".[test]"
pytest
```