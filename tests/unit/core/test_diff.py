"""Unit tests for core/diff.py"""

import pytest

from linediff.core.diff import diff
from linediff.core.models import Operation

from hunk_factory import D, I, PAIRS, U


@pytest.mark.parametrize("a,b,expected", [
    ([], [], []),
    (["aaa", "bbb", "ccc"], ["aaa", "bbb", "ccc"], [U(0, "aaa"), U(1, "bbb"), U(2, "ccc")]),
    ([], ["aaa", "bbb", "ccc"], [I(0, "aaa"), I(1, "bbb"), I(2, "ccc")]),
    (["aaa", "bbb", "ccc"], ["aaa", "bbb", "ZZZ", "ccc"],
     [U(0, "aaa"), U(1, "bbb"), I(2, "ZZZ"), U(2, "ccc")]),
    (["aaa", "bbb", "ccc"], ["ZZZ", "aaa", "bbb", "ccc"],
     [I(0, "ZZZ"), U(0, "aaa"), U(1, "bbb"), U(2, "ccc")]),
    (["aaa", "bbb", "ccc"], ["aaa", "bbb", "ccc", "ZZZ"],
     [U(0, "aaa"), U(1, "bbb"), U(2, "ccc"), I(3, "ZZZ")]),
    (["aaa", "bbb", "ccc"], [], [D(0, "aaa"), D(1, "bbb"), D(2, "ccc")]),
    (["aaa", "bbb", "ccc"], ["aaa", "ccc"], [U(0, "aaa"), D(1, "bbb"), U(2, "ccc")]),
    (["aaa", "bbb", "ccc"], ["bbb", "ccc"], [D(0, "aaa"), U(1, "bbb"), U(2, "ccc")]),
    (["aaa", "bbb", "ccc"], ["aaa", "bbb"], [U(0, "aaa"), U(1, "bbb"), D(2, "ccc")]),
    (["aaa", "bbb", "ccc"], ["xxx", "yyy", "zzz"],
     [D(0, "aaa"), I(0, "xxx"), D(1, "bbb"), I(1, "yyy"), D(2, "ccc"), I(2, "zzz")]),
    (["aaa", "bbb", "ccc"], ["aaa", "ZZZ", "ccc"],
     [U(0, "aaa"), D(1, "bbb"), I(1, "ZZZ"), U(2, "ccc")]),
    (["aaa", "bbb", "ccc"], ["ZZZ", "bbb", "ccc"],
     [D(0, "aaa"), I(0, "ZZZ"), U(1, "bbb"), U(2, "ccc")]),
    (["aaa", "bbb", "ccc"], ["aaa", "bbb", "ZZZ"],
     [U(0, "aaa"), U(1, "bbb"), D(2, "ccc"), I(2, "ZZZ")]),
], ids=[
    "empty", "unchanged", "insert from empty", "insert middle", "insert start", "insert end",
    "delete all", "delete middle", "delete start", "delete end",
    "replace all", "change middle", "change start", "change end",
])
def test_diff_fixtures(a, b, expected):
    """diff produces the expected hunks for each basic edit shape."""
    assert diff(a, b) == expected


@pytest.mark.parametrize("a,b", PAIRS)
def test_diff_reconstructs_both_sides(a, b):
    """Unchanged+delete lines rebuild a; unchanged+insert lines rebuild b."""
    hunks = diff(a, b)
    assert [h.line for h in hunks if h.operation != Operation.insert] == a
    assert [h.line for h in hunks if h.operation != Operation.delete] == b


@pytest.mark.parametrize("a,b", PAIRS)
def test_diff_line_nums_index_their_own_side(a, b):
    """Unchanged/delete line_num indexes a; insert line_num indexes b."""
    for h in diff(a, b):
        if h.operation == Operation.insert:
            assert b[h.line_num] == h.line
        else:
            assert a[h.line_num] == h.line


@pytest.mark.parametrize("a,b,unchanged", [
    (["a", "b"], ["b", "a"], 1),
    (list("abcabba"), list("cbabac"), 4),
    (["x", "a", "y", "b", "z"], ["a", "q", "b"], 2),
])
def test_diff_keeps_longest_common_subsequence(a, b, unchanged):
    """The number of unchanged hunks equals the LCS length."""
    hunks = diff(a, b)
    assert sum(h.operation == Operation.unchanged for h in hunks) == unchanged


def test_diff_identical_duplicates():
    """Duplicate lines diff against themselves as all-unchanged, in order."""
    lines = ["x", "x", "y", "x"]
    assert diff(lines, lines) == [U(i, line) for i, line in enumerate(lines)]


def test_diff_accepts_tuples():
    """Any sequence of strings is accepted."""
    assert diff(("a",), ("a",)) == [U(0, "a")]


def test_diff_returns_list_for_empty_inputs():
    """An empty pair yields an empty list, never None."""
    result = diff([], [])
    assert result == [] and isinstance(result, list)
