"""Find keys present in only one of two documents."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

from .diff_types import KeyDiff, WorkingContext
from .paths import format_index, format_key
from .values import ValueType, ensure_object, kind_of


def _key_diffs_in_values(
    key: str, a: Any, b: Any, working_context: WorkingContext
) -> List[KeyDiff]:
    a_type = kind_of(a)
    b_type = kind_of(b)

    if a_type is ValueType.OBJECT and b_type is ValueType.OBJECT:
        return find_key_diffs(key, a, b, working_context)

    if (
        working_context.config.array_same_order
        and a_type is ValueType.ARRAY
        and b_type is ValueType.ARRAY
        and len(a) == len(b)
    ):
        diffs: List[KeyDiff] = []
        for index, (a_item, b_item) in enumerate(zip(a, b)):
            diffs.extend(
                _key_diffs_in_values(format_index(key, index), a_item, b_item, working_context)
            )
        return diffs

    return []


def find_key_diffs(
    key: str,
    a: Mapping[str, Any],
    b: Mapping[str, Any],
    working_context: WorkingContext,
) -> List[KeyDiff]:
    """Return a :class:`KeyDiff` for every path that only one side contains.

    Keys missing from ``b`` are reported first in ``a``'s order, with nested
    findings inline; keys missing from ``a`` follow in ``b``'s order.
    """

    a = ensure_object(a)
    b = ensure_object(b)
    file_a = working_context.file_a.name
    file_b = working_context.file_b.name

    # Insertion-ordered set of b's paths still waiting for a counterpart in a.
    pending_b: Dict[str, None] = {format_key(key, b_key): None for b_key in b}
    diffs: List[KeyDiff] = []

    for a_key, a_value in a.items():
        path = format_key(key, a_key)
        if a_key in b:
            pending_b.pop(path, None)
            diffs.extend(_key_diffs_in_values(path, a_value, b[a_key], working_context))
        else:
            diffs.append(KeyDiff(path, file_a, file_b))

    diffs.extend(KeyDiff(path, file_b, file_a) for path in pending_b)
    return diffs


__all__ = ["find_key_diffs"]
