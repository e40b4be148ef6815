"""Plain-text rendering of hunk lists, one output line per hunk"""

from linediff.core.models import Hunk, Operation


PREFIXES: dict[Operation, str] = {
    Operation.unchanged: "  ",
    Operation.delete:    "- ",
    Operation.insert:    "+ ",
}


def format_hunk(hunk: Hunk, line_numbers: bool = False) -> str:
    """Return the hunk's line with its operation prefix (and 1-based number)."""
    text = f"{PREFIXES[hunk.operation]}{hunk.line}"
    if line_numbers:
        return f"{hunk.line_num + 1:>5} {text}"
    return text


def format_hunks(hunks: list[Hunk], line_numbers: bool = False, gap_marker: str = "...") -> str:
    """Join formatted hunks with newlines, marking skipped lines.

    A gap is a run of lines missing between two consecutive hunks on either
    side, as left behind by prune_context. Pruning drops only unchanged
    hunks, so every change is present and an unchanged hunk's modified index
    is its line_num shifted by the inserts minus deletes seen so far.
    """
    lines: list[str] = []
    expected_orig = expected_mod = 0
    shift = 0

    for hunk in hunks:
        if hunk.operation == Operation.insert:
            gap = hunk.line_num > expected_mod
            expected_mod = hunk.line_num + 1
            shift += 1
        elif hunk.operation == Operation.delete:
            gap = hunk.line_num > expected_orig
            expected_orig = hunk.line_num + 1
            shift -= 1
        else:
            gap = hunk.line_num > expected_orig
            expected_orig = hunk.line_num + 1
            expected_mod = hunk.line_num + shift + 1
        if gap and lines:
            lines.append(gap_marker)
        lines.append(format_hunk(hunk, line_numbers))

    return "\n".join(lines)
