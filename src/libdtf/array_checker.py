"""Unordered array comparison based on multiset differences.

Each array is reduced to occurrence counts of its rendered elements, so
duplicates are accounted for: three ``"x"`` on one side against one on the
other yields two extra occurrences, not zero.
"""
from __future__ import annotations

from collections import Counter
from typing import Any, Iterable, List, Mapping, Sequence

from .diff_types import ArrayDiff, ArrayDiffDesc, WorkingContext
from .paths import format_key
from .values import ValueType, ensure_object, kind_of, render


def count_occurrences(items: Iterable[Any]) -> Counter[str]:
    """Count rendered elements, keeping first-occurrence order."""

    return Counter(render(item) for item in items)


def diff_arrays(key: str, a: Sequence[Any], b: Sequence[Any]) -> List[ArrayDiff]:
    """Return the multiset difference between ``a`` and ``b`` as diff records.

    Every surplus occurrence in ``a`` yields an ``AHas``/``BMisses`` pair and
    every surplus occurrence in ``b`` a ``BHas``/``AMisses`` pair.
    """

    counts_a = count_occurrences(a)
    counts_b = count_occurrences(b)

    # Counter subtraction drops non-positive counts and keeps the left order.
    a_extra = counts_a - counts_b
    b_extra = counts_b - counts_a

    diffs: List[ArrayDiff] = []
    for value, count in a_extra.items():
        for _ in range(count):
            diffs.append(ArrayDiff(key, ArrayDiffDesc.A_HAS, value))
            diffs.append(ArrayDiff(key, ArrayDiffDesc.B_MISSES, value))
    for value, count in b_extra.items():
        for _ in range(count):
            diffs.append(ArrayDiff(key, ArrayDiffDesc.B_HAS, value))
            diffs.append(ArrayDiff(key, ArrayDiffDesc.A_MISSES, value))
    return diffs


def _array_diffs_in_values(
    key: str, a: Any, b: Any, working_context: WorkingContext
) -> List[ArrayDiff]:
    a_type = kind_of(a)
    b_type = kind_of(b)

    if a_type is ValueType.OBJECT and b_type is ValueType.OBJECT:
        return _find_array_diffs(key, a, b, working_context)
    if a_type is ValueType.ARRAY and b_type is ValueType.ARRAY:
        return diff_arrays(key, a, b)
    return []


def _find_array_diffs(
    key: str,
    a: Mapping[str, Any],
    b: Mapping[str, Any],
    working_context: WorkingContext,
) -> List[ArrayDiff]:
    a = ensure_object(a)
    b = ensure_object(b)
    diffs: List[ArrayDiff] = []
    for a_key, a_value in a.items():
        if a_key in b:
            diffs.extend(
                _array_diffs_in_values(format_key(key, a_key), a_value, b[a_key], working_context)
            )
    return diffs


def find_array_diffs(
    key: str,
    a: Mapping[str, Any],
    b: Mapping[str, Any],
    working_context: WorkingContext,
) -> List[ArrayDiff]:
    """Return array membership diffs for every shared array-valued path.

    Always empty when ``array_same_order`` is set; positional differences are
    then reported by the value comparator instead.
    """

    if working_context.config.array_same_order:
        return []
    return _find_array_diffs(key, a, b, working_context)


__all__ = ["count_occurrences", "diff_arrays", "find_array_diffs"]
