import pytest

from readassembly.assemble import Method, Timings, assemble_reads, consensus, overlay

ALL_METHODS = list(Method)


def test_consensus_majority_and_tie_break():
    result = consensus(3, ["AC", "AG"], [[0], [0]])
    assert result == "ACN"


def test_consensus_majority_wins():
    reads = ["AT", "AG", "AG"]
    result = consensus(2, reads, [[0], [0], [0]])
    assert result == reads[1]


def test_consensus_skips_out_of_range():
    result = consensus(3, ["ACG"], [[1]])
    assert result == "N" * 3


def test_overlay_later_read_wins():
    result = overlay(3, ["AC", "GG"], [[0], [1]])
    assert result == "A" + "GG"


def test_overlay_skips_negative_and_overflow():
    result = overlay(4, ["AC", "GT"], [[-1], [3]])
    assert result == "N" * 4


def test_overlay_and_consensus_agree_for_single_read():
    reads = ["TTGA"]
    positions = [[2]]
    assert overlay(8, reads, positions) == consensus(8, reads, positions)


@pytest.mark.parametrize("method", ALL_METHODS)
def test_exact_reads_rebuild_reference(method):
    reference = "ACGTACGTTGCA"
    reads = [reference[0:4], reference[4:8], reference[8:12]]
    assembled, timings = assemble_reads(reference, reads, 0, method)
    assert assembled == reference
    assert timings.total_ms >= timings.map_ms >= 0


@pytest.mark.parametrize("method", ALL_METHODS)
def test_uncovered_positions_are_n(method):
    reference = "AAAACCCC"
    assembled, _ = assemble_reads(reference, ["AAAA"], 0, method)
    assert assembled == "AAAA" + "N" * 4
    assert len(assembled) == len(reference)


def test_method_given_as_string():
    reference = "ACGTACGT"
    assembled, timings = assemble_reads(reference, ["ACGT"], 0, "linear")
    assert assembled == reference
    assert timings.build_ms is None


def test_index_methods_report_build_time():
    _, timings = assemble_reads("ACGTACGT", ["ACGT"], 0, Method.NIBBLE)
    assert timings.build_ms >= 0
    assert timings.total_ms == timings.build_ms + timings.map_ms + timings.assembly_ms


def test_invalid_base_raises_for_pair_index():
    with pytest.raises(ValueError):
        assemble_reads("ACXT", ["AC"], 0, Method.PAIR)


def test_timings_write_consensus(tmp_path):
    path = tmp_path / "timing.txt"
    Timings(build_ms=1, map_ms=2, assembly_ms=3, consensus=True).write(path)
    assert path.read_text() == (
        "FM-index build time     : 1 ms\n"
        "Read mapping time       : 2 ms\n"
        "Consensus assembly time : 3 ms\n"
        "Total pipeline time     : 6 ms\n"
    )


def test_timings_write_without_build(tmp_path):
    path = tmp_path / "timing.txt"
    timings = Timings(build_ms=None, map_ms=4, assembly_ms=5, consensus=False)
    timings.write(path)
    lines = path.read_text().splitlines()
    assert lines[0] == "Read mapping time       : 4 ms"
    assert lines[1] == "Assembly time           : 5 ms"
    assert lines[2].startswith("Total pipeline time     : ")
    assert len(lines) == 3


def test_timings_write_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        Timings(1, 1, 1).write(tmp_path / "missing" / "timing.txt")