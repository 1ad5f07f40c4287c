"""Find shared keys whose values are of different kinds."""
from __future__ import annotations

from typing import Any, List, Mapping

from .diff_types import TypeDiff, WorkingContext
from .paths import format_index, format_key
from .values import ValueType, ensure_object, kind_of


def _type_diffs_in_values(
    key: str, a: Any, b: Any, working_context: WorkingContext
) -> List[TypeDiff]:
    a_type = kind_of(a)
    b_type = kind_of(b)
    diffs: List[TypeDiff] = []

    if a_type is ValueType.OBJECT and b_type is ValueType.OBJECT:
        diffs.extend(find_type_diffs(key, a, b, working_context))
    elif (
        working_context.config.array_same_order
        and a_type is ValueType.ARRAY
        and b_type is ValueType.ARRAY
        and len(a) == len(b)
    ):
        for index, (a_item, b_item) in enumerate(zip(a, b)):
            diffs.extend(
                _type_diffs_in_values(format_index(key, index), a_item, b_item, working_context)
            )

    # Post-order: nested mismatches come before the enclosing one.
    if a_type is not b_type:
        diffs.append(TypeDiff(key, str(a_type), str(b_type)))
    return diffs


def find_type_diffs(
    key: str,
    a: Mapping[str, Any],
    b: Mapping[str, Any],
    working_context: WorkingContext,
) -> List[TypeDiff]:
    """Return a :class:`TypeDiff` for every shared path whose kinds differ."""

    a = ensure_object(a)
    b = ensure_object(b)
    diffs: List[TypeDiff] = []
    for a_key, a_value in a.items():
        if a_key in b:
            diffs.extend(
                _type_diffs_in_values(format_key(key, a_key), a_value, b[a_key], working_context)
            )
    return diffs


__all__ = ["find_type_diffs"]
