"""Unit tests for unordered array diffs."""
from __future__ import annotations

from collections import Counter

from libdtf.array_checker import count_occurrences, diff_arrays, find_array_diffs
from libdtf.diff_types import ArrayDiff, ArrayDiffDesc, WorkingContext

A_HAS = ArrayDiffDesc.A_HAS
A_MISSES = ArrayDiffDesc.A_MISSES
B_HAS = ArrayDiffDesc.B_HAS
B_MISSES = ArrayDiffDesc.B_MISSES


def test_find_array_diffs(unordered: WorkingContext) -> None:
    a = {
        "no_diff_array": [1, 2, 3, 4],
        "diff_array": [1, 2, 3, 4],
        "nested": {"no_diff_array": [1, 2, 3, 4], "diff_array": [1, 2, 3, 4]},
    }
    b = {
        "no_diff_array": [1, 2, 3, 4],
        "diff_array": [1, 2, 5, 6],
        "nested": {"no_diff_array": [4, 3, 2, 1], "diff_array": [1, 2, 5, 6]},
    }

    diffs = find_array_diffs("", a, b, unordered)

    expected = [
        ArrayDiff("diff_array", A_HAS, "3"),
        ArrayDiff("diff_array", B_MISSES, "3"),
        ArrayDiff("diff_array", A_HAS, "4"),
        ArrayDiff("diff_array", B_MISSES, "4"),
        ArrayDiff("diff_array", B_HAS, "5"),
        ArrayDiff("diff_array", A_MISSES, "5"),
        ArrayDiff("diff_array", B_HAS, "6"),
        ArrayDiff("diff_array", A_MISSES, "6"),
    ]
    nested = [ArrayDiff(f"nested.{diff.key}", diff.descriptor, diff.value) for diff in expected]
    assert diffs == expected + nested


def test_duplicates_are_counted(unordered: WorkingContext) -> None:
    diffs = find_array_diffs("", {"arr": [1, 1, 2, 3]}, {"arr": [1, 2, 2]}, unordered)

    assert diffs == [
        ArrayDiff("arr", A_HAS, "1"),
        ArrayDiff("arr", B_MISSES, "1"),
        ArrayDiff("arr", A_HAS, "3"),
        ArrayDiff("arr", B_MISSES, "3"),
        ArrayDiff("arr", B_HAS, "2"),
        ArrayDiff("arr", A_MISSES, "2"),
    ]


def test_each_surplus_occurrence_is_reported() -> None:
    diffs = diff_arrays("tags", ["x", "x", "x"], ["x"])

    assert diffs == [
        ArrayDiff("tags", A_HAS, "x"),
        ArrayDiff("tags", B_MISSES, "x"),
        ArrayDiff("tags", A_HAS, "x"),
        ArrayDiff("tags", B_MISSES, "x"),
    ]


def test_composite_elements_compare_by_render() -> None:
    diffs = diff_arrays("items", [{"a": 1}, [1, 2]], [{"a": 2}, [1, 2]])

    assert diffs == [
        ArrayDiff("items", A_HAS, '{"a":1}'),
        ArrayDiff("items", B_MISSES, '{"a":1}'),
        ArrayDiff("items", B_HAS, '{"a":2}'),
        ArrayDiff("items", A_MISSES, '{"a":2}'),
    ]


def test_ordered_mode_disables_array_diffs(ordered: WorkingContext) -> None:
    assert find_array_diffs("", {"arr": [1, 2, 3]}, {"arr": [1, 9, 3]}, ordered) == []


def test_non_array_pairs_are_ignored(unordered: WorkingContext) -> None:
    a = {"arr": [1], "scalar": 1, "mixed": [1]}
    b = {"arr": [1], "scalar": 2, "mixed": {"k": 1}}

    assert find_array_diffs("", a, b, unordered) == []


def test_arrays_inside_arrays_are_not_walked(unordered: WorkingContext) -> None:
    diffs = find_array_diffs("", {"m": [[1, 2], [3]]}, {"m": [[2, 1], [3]]}, unordered)

    assert diffs == [
        ArrayDiff("m", A_HAS, "[1,2]"),
        ArrayDiff("m", B_MISSES, "[1,2]"),
        ArrayDiff("m", B_HAS, "[2,1]"),
        ArrayDiff("m", A_MISSES, "[2,1]"),
    ]


def test_count_occurrences_keeps_first_seen_order() -> None:
    counts = count_occurrences(["b", 1, "b", None, 1, "b"])

    assert counts == Counter({"b": 3, "1": 2, "null": 1})
    assert list(counts) == ["b", "1", "null"]
