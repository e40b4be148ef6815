"""Hunk builder: turn an edit script into positioned Hunk records"""

from linediff.core.models import Edit, EditTag, Hunk, Operation


def build_hunks(edits: list[Edit]) -> list[Hunk]:
    """Walk the edit script in order, numbering each line on its own side.

    orig_idx advances on unchanged and deleted lines, mod_idx on unchanged and
    inserted lines. A replace run is emitted as delete/insert pairs.
    """
    hunks: list[Hunk] = []
    orig_idx = mod_idx = 0

    def _delete(line: str) -> None:
        nonlocal orig_idx
        hunks.append(Hunk(operation=Operation.delete, line_num=orig_idx, line=line))
        orig_idx += 1

    def _insert(line: str) -> None:
        nonlocal mod_idx
        hunks.append(Hunk(operation=Operation.insert, line_num=mod_idx, line=line))
        mod_idx += 1

    for edit in edits:
        if edit.tag == EditTag.equal:
            for line in edit.old:
                hunks.append(Hunk(operation=Operation.unchanged, line_num=orig_idx, line=line))
                orig_idx += 1
                mod_idx += 1
        elif edit.tag == EditTag.delete:
            for line in edit.old:
                _delete(line)
        elif edit.tag == EditTag.insert:
            for line in edit.new:
                _insert(line)
        else:                  # EditTag.replace
            for old_line, new_line in zip(edit.old, edit.new, strict=True):
                _delete(old_line)
                _insert(new_line)

    return hunks
