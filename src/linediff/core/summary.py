"""Compact change statistics for a hunk list"""

from linediff.core.models import Hunk, Operation


def summarize(hunks: list[Hunk]) -> dict[str, int]:
    """Return unchanged/deleted/inserted hunk counts. Works on pruned lists too."""
    unchanged = deleted = inserted = 0

    for hunk in hunks:
        if hunk.operation == Operation.unchanged:
            unchanged += 1
        elif hunk.operation == Operation.delete:
            deleted += 1
        elif hunk.operation == Operation.insert:
            inserted += 1

    return {"unchanged": unchanged, "deleted": deleted, "inserted": inserted}
