"""Find shared keys whose values are not equal."""
from __future__ import annotations

from typing import Any, List, Mapping

from .diff_types import ValueDiff, WorkingContext
from .paths import format_index, format_key
from .values import ValueType, ensure_object, kind_of, render, values_equal


def _value_diffs_in_values(
    key: str, a: Any, b: Any, working_context: WorkingContext
) -> List[ValueDiff]:
    a_type = kind_of(a)
    b_type = kind_of(b)

    if a_type is ValueType.OBJECT and b_type is ValueType.OBJECT:
        return find_value_diffs(key, a, b, working_context)

    if (
        working_context.config.array_same_order
        and a_type is ValueType.ARRAY
        and b_type is ValueType.ARRAY
        and len(a) == len(b)
    ):
        diffs: List[ValueDiff] = []
        for index, (a_item, b_item) in enumerate(zip(a, b)):
            diffs.extend(
                _value_diffs_in_values(format_index(key, index), a_item, b_item, working_context)
            )
        return diffs

    # Scalars, and arrays compared as opaque wholes.
    if values_equal(a, b):
        return []
    return [ValueDiff(key, render(a), render(b))]


def find_value_diffs(
    key: str,
    a: Mapping[str, Any],
    b: Mapping[str, Any],
    working_context: WorkingContext,
) -> List[ValueDiff]:
    """Return a :class:`ValueDiff` for every shared path whose values differ.

    Objects are always walked field by field. Arrays are walked index by index
    only when ``array_same_order`` is set and both sides have the same length;
    otherwise the whole array is compared and rendered as one value.
    """

    a = ensure_object(a)
    b = ensure_object(b)
    diffs: List[ValueDiff] = []
    for a_key, a_value in a.items():
        if a_key in b:
            diffs.extend(
                _value_diffs_in_values(format_key(key, a_key), a_value, b[a_key], working_context)
            )
    return diffs


__all__ = ["find_value_diffs"]
