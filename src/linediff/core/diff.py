"""Public entry points: line diff and context pruning"""

from typing import Sequence

from linediff.core.hunks import build_hunks
from linediff.core.match import WARN_CELLS, match
from linediff.core.models import Hunk
from linediff.core.prune import prune_context


__all__ = ["diff", "prune_context"]


def diff(a: Sequence[str], b: Sequence[str], warn_cells: int = WARN_CELLS) -> list[Hunk]:
    """Return the hunks turning line sequence a into b. Empty list if both are empty."""
    return build_hunks(match(a, b, warn_cells=warn_cells))
