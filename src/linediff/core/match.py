"""Line matcher: longest-common-subsequence alignment of two line sequences"""

import logging
from typing import Sequence

from linediff.core.models import Edit, EditTag


logger = logging.getLogger(__name__)

WARN_CELLS = 4_000_000


def lcs_table(a: Sequence[str], b: Sequence[str]) -> list[list[int]]:
    """Return L where L[i][j] is the LCS length of a[i:] and b[j:].

    The table has one extra row and column of zeros for the exhausted suffixes.
    """
    n, m = len(a), len(b)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row, below = table[i], table[i + 1]
        for j in range(m - 1, -1, -1):
            if a[i] == b[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])
    return table


def _steps(a: Sequence[str], b: Sequence[str], table: list[list[int]]):
    """Yield (tag, i, j) steps walking the table forward from (0, 0).

    Matches win outright. A mismatch on both sides pairs the two lines as a
    replacement when dropping both costs no common line; otherwise the side
    whose suffix keeps the longer LCS is consumed, deletes first on ties.
    """
    n, m = len(a), len(b)
    i = j = 0
    while i < n or j < m:
        if i < n and j < m and a[i] == b[j]:
            yield EditTag.equal, i, j
            i += 1
            j += 1
        elif i < n and j < m and table[i + 1][j + 1] == table[i][j]:
            yield EditTag.replace, i, j
            i += 1
            j += 1
        elif j == m or (i < n and table[i + 1][j] >= table[i][j + 1]):
            yield EditTag.delete, i, j
            i += 1
        else:
            yield EditTag.insert, i, j
            j += 1


def match(a: Sequence[str], b: Sequence[str], warn_cells: int = WARN_CELLS) -> list[Edit]:
    """Align a and b, returning the edit script as an ordered list of runs.

    Consecutive steps with the same tag are merged into one Edit. The table is
    O(len(a) * len(b)) in time and space; a warning is logged past warn_cells
    (0 disables the warning).
    """
    cells = len(a) * len(b)
    logger.debug("Matching %d x %d lines", len(a), len(b))
    if warn_cells and cells > warn_cells:
        logger.warning(
            "Diffing %d x %d lines builds a %d-cell table; expect slow, memory-heavy matching",
            len(a), len(b), cells,
        )

    table = lcs_table(a, b)
    edits: list[Edit] = []
    tag = None
    old: list[str] = []
    new: list[str] = []

    for step, i, j in _steps(a, b, table):
        if step != tag and tag is not None:
            edits.append(Edit(tag, tuple(old), tuple(new)))
            old, new = [], []
        tag = step
        if step != EditTag.insert:
            old.append(a[i])
        if step != EditTag.delete:
            new.append(b[j])

    if tag is not None:
        edits.append(Edit(tag, tuple(old), tuple(new)))
    return edits
