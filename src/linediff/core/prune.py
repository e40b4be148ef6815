"""Context pruner: keep unchanged hunks only near a change"""

from linediff.core.models import Hunk, Operation


def _change_distances(hunks: list[Hunk]) -> list[float]:
    """Return each hunk's list-index distance to the nearest non-unchanged hunk."""
    inf = float("inf")
    dist = [inf] * len(hunks)

    last = None
    for i, hunk in enumerate(hunks):
        if hunk.operation != Operation.unchanged:
            last = i
        if last is not None:
            dist[i] = i - last

    last = None
    for i in range(len(hunks) - 1, -1, -1):
        if hunks[i].operation != Operation.unchanged:
            last = i
        if last is not None:
            dist[i] = min(dist[i], last - i)

    return dist


def prune_context(hunks: list[Hunk], context: int) -> list[Hunk]:
    """Drop unchanged hunks more than `context` list positions from any change.

    Changes are always kept and order is preserved. A window spanning the
    whole list keeps every hunk, even when the list holds no change; a
    narrower window drops every hunk of a change-free list. Raises ValueError
    for a negative context.
    """
    if context < 0:
        raise ValueError(f"context must be >= 0, got {context}")
    if context >= len(hunks):
        return list(hunks)
    dist = _change_distances(hunks)
    return [h for h, d in zip(hunks, dist) if d <= context]
