"""Helpers over the parsed document value model.

A document node is one of ``None``, ``bool``, ``int``/``float``, ``str``, a
sequence (``list``/``tuple``) or a ``Mapping`` with string keys. The engine
only reads these trees; anything else is a contract breach by whoever built
the tree and raises :class:`~libdtf.errors.ContractViolationError`.
"""
from __future__ import annotations

import json
from enum import Enum
from typing import Any, Mapping, Sequence

from .errors import ContractViolationError


class ValueType(str, Enum):
    """Kind tag of a document node, rendered with the names used in type diffs."""

    NULL = "null"
    BOOLEAN = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    def __str__(self) -> str:
        return self.value


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def kind_of(value: Any) -> ValueType:
    """Return the :class:`ValueType` of ``value``."""

    if value is None:
        return ValueType.NULL
    # bool is a subclass of int, so it must be tested first.
    if isinstance(value, bool):
        return ValueType.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueType.NUMBER
    if isinstance(value, str):
        return ValueType.STRING
    if isinstance(value, Mapping):
        return ValueType.OBJECT
    if _is_sequence(value):
        return ValueType.ARRAY
    raise ContractViolationError(
        f"Unsupported document node of type {type(value).__name__}",
        context={"value": repr(value)},
    )


def ensure_object(value: Any) -> Mapping[str, Any]:
    """Return ``value`` if it is an object node with string keys."""

    if kind_of(value) is not ValueType.OBJECT:
        raise ContractViolationError(
            f"Expected an object node but received {kind_of(value)}",
            context={"value": repr(value)},
        )
    for key in value:
        if not isinstance(key, str):
            raise ContractViolationError(
                f"Object keys must be strings, received {type(key).__name__}",
                context={"key": repr(key)},
            )
    return value


def render(value: Any) -> str:
    """Render ``value`` the way it appears inside diff records.

    Strings are returned as-is. Every other kind is serialized as compact JSON
    with sorted object keys, e.g. ``[1,2,3,4]`` or ``{"a":1}``.
    """

    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    except TypeError as exc:
        raise ContractViolationError(
            "Document node cannot be rendered",
            context={"value": repr(value)},
        ) from exc


def values_equal(a: Any, b: Any) -> bool:
    """Structural equality that respects value kinds.

    ``True`` never equals ``1`` and ``1`` never equals ``1.0``: numbers compare
    by their canonical render so value and array diffs agree with each other.
    """

    kind = kind_of(a)
    if kind is not kind_of(b):
        return False
    if kind is ValueType.OBJECT:
        if set(a) != set(b):
            return False
        return all(values_equal(a[key], b[key]) for key in a)
    if kind is ValueType.ARRAY:
        if len(a) != len(b):
            return False
        return all(values_equal(a_item, b_item) for a_item, b_item in zip(a, b))
    if kind is ValueType.NUMBER:
        return render(a) == render(b)
    return a == b


__all__ = ["ValueType", "kind_of", "ensure_object", "render", "values_equal"]
