"""Reading and writing the plain-text files used by the assembly pipeline."""

from __future__ import annotations

import os

_ENCODING = "utf-8"


def read_reference(path: str | os.PathLike[str]) -> str:
    """Return the whole content of the reference file, unchanged."""
    try:
        with open(path, encoding=_ENCODING, newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise OSError(f"open fail: {os.fspath(path)}") from exc


def read_reads(path: str | os.PathLike[str]) -> list[str]:
    """Return the comma-separated reads found on the first line of a file.

    A trailing comma yields a final empty read. An empty file is an error.
    """
    content = read_reference(path)
    if not content:
        raise ValueError(f"read fail: {os.fspath(path)}")
    first_line = content.split("\n", 1)[0]
    return first_line.split(",")


def write_text(path: str | os.PathLike[str], content: str) -> None:
    """Write ``content`` to ``path`` exactly as given."""
    try:
        with open(path, "w", encoding=_ENCODING, newline="") as handle:
            handle.write(content)
    except OSError as exc:
        raise OSError(f"open fail: {os.fspath(path)}") from exc