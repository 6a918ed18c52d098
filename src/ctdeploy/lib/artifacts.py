"""Inspection of build artifacts and the flattened source file."""

from dataclasses import dataclass
from pathlib import Path

# Lines after a "compiler" key that may hold its "version"
_VERSION_LOOKAHEAD = 2


@dataclass(frozen=True)
class FileStats:
    size_bytes: int
    lines: int


def extract_compiler_version(artifact: Path) -> str | None:
    """Return the compiler version recorded in a Truffle build artifact.

    Works on the text, not the JSON structure: find a line containing
    ``"compiler"``, then the first line at most two lines further down
    (inclusive) containing ``"version"``, and take its fourth
    double-quote-delimited field. Truffle pretty-prints artifacts as::

        "compiler": {
          "name": "solc",
          "version": "0.5.10+commit.5a6ea5b1.Emscripten.clang"
        },

    Returns None if no such line exists.
    """
    lines = artifact.read_text(encoding="utf-8", errors="replace").splitlines()
    for i, line in enumerate(lines):
        if '"compiler"' not in line:
            continue
        for candidate in lines[i : i + _VERSION_LOOKAHEAD + 1]:
            if '"version"' not in candidate:
                continue
            fields = candidate.split('"')
            if len(fields) > 3:
                return fields[3]
    return None


def file_stats(path: Path) -> FileStats:
    """Size in bytes and newline count (what ``wc -c`` / ``wc -l`` report)."""
    data = path.read_bytes()
    return FileStats(size_bytes=len(data), lines=data.count(b"\n"))
