"""Property-based tests for invariants that hold for any pair of documents."""
from __future__ import annotations

import copy
from collections import Counter
from typing import Any

from hypothesis import given, settings
from hypothesis import strategies as st

from libdtf.api import compare
from libdtf.array_checker import diff_arrays
from libdtf.diff_types import ArrayDiffDesc, WorkingContext
from libdtf.key_checker import find_key_diffs

keys = st.text(alphabet="abcxyz", min_size=1, max_size=3)
scalars = st.none() | st.booleans() | st.integers(min_value=-50, max_value=50) | st.text(alphabet="pqr", max_size=3)
values = st.recursive(
    scalars,
    lambda children: st.lists(children, max_size=4) | st.dictionaries(keys, children, max_size=4),
    max_leaves=20,
)
documents = st.dictionaries(keys, values, max_size=5)

UNORDERED = WorkingContext.from_names("a.json", "b.json")
ORDERED = WorkingContext.from_names("a.json", "b.json", array_same_order=True)


@settings(max_examples=200)
@given(documents, documents, st.booleans())
def test_key_diffs_are_symmetric(a: dict[str, Any], b: dict[str, Any], array_same_order: bool) -> None:
    forward = WorkingContext.from_names("a.json", "b.json", array_same_order=array_same_order)
    backward = WorkingContext.from_names("b.json", "a.json", array_same_order=array_same_order)

    assert Counter(find_key_diffs("", a, b, forward)) == Counter(find_key_diffs("", b, a, backward))


@given(documents, st.sampled_from([UNORDERED, ORDERED]))
def test_document_equals_itself(document: dict[str, Any], context: WorkingContext) -> None:
    result = compare(document, copy.deepcopy(document), context)

    assert result.is_empty()


@given(st.lists(values, max_size=8), st.lists(values, max_size=8))
def test_array_diffs_conserve_counts(a: list[Any], b: list[Any]) -> None:
    diffs = diff_arrays("arr", a, b)
    per_descriptor = {
        descriptor: Counter(diff.value for diff in diffs if diff.descriptor is descriptor)
        for descriptor in ArrayDiffDesc
    }

    assert per_descriptor[ArrayDiffDesc.A_HAS] == per_descriptor[ArrayDiffDesc.B_MISSES]
    assert per_descriptor[ArrayDiffDesc.B_HAS] == per_descriptor[ArrayDiffDesc.A_MISSES]
    assert not (per_descriptor[ArrayDiffDesc.A_HAS] & per_descriptor[ArrayDiffDesc.B_HAS])


@given(documents, documents)
def test_ordered_mode_has_no_array_diffs(a: dict[str, Any], b: dict[str, Any]) -> None:
    assert compare(a, b, ORDERED).array_diffs == []


@given(documents, documents)
def test_unordered_mode_never_indexes_into_arrays(a: dict[str, Any], b: dict[str, Any]) -> None:
    result = compare(a, b, UNORDERED)

    for diff in [*result.key_diffs, *result.type_diffs, *result.value_diffs, *result.array_diffs]:
        assert "[" not in diff.key


@given(documents, documents, st.sampled_from([UNORDERED, ORDERED]))
def test_every_path_resolves_in_a_document(
    a: dict[str, Any], b: dict[str, Any], context: WorkingContext
) -> None:
    result = compare(a, b, context)

    for diff in result.key_diffs:
        owner = a if diff.has == "a.json" else b
        assert _resolve(owner, diff.key) is not _MISSING
    for diff in [*result.type_diffs, *result.value_diffs, *result.array_diffs]:
        assert _resolve(a, diff.key) is not _MISSING
        assert _resolve(b, diff.key) is not _MISSING


_MISSING = object()


def _resolve(document: Any, path: str) -> Any:
    """Follow a ``a.b[0].c`` path; keys in these documents never contain separators."""

    node = document
    for part in path.split("."):
        name, _, rest = part.partition("[")
        if name not in node:
            return _MISSING
        node = node[name]
        if rest:
            for index in rest.rstrip("]").split("]["):
                node = node[int(index)]
    return node
