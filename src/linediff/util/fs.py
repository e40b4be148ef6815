from __future__ import annotations
from pathlib import Path


def read_lines(path: Path | str) -> list[str]:
    """Read a UTF-8 text file into a list of lines without terminators."""
    return Path(path).read_text(encoding="utf-8").splitlines()
