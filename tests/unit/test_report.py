from __future__ import annotations

from libdtf.diff_types import (
    ArrayDiff,
    ArrayDiffDesc,
    ComparisonResult,
    KeyDiff,
    TypeDiff,
    ValueDiff,
    WorkingContext,
)
from libdtf.report import render_markdown, result_to_payload


def test_render_markdown_sections(unordered: WorkingContext) -> None:
    result = ComparisonResult(
        key_diffs=[KeyDiff("x", "a.json", "b.json")],
        type_diffs=[TypeDiff("n", "string", "number")],
        value_diffs=[ValueDiff("n", "s", "5")],
        array_diffs=[
            ArrayDiff("arr", ArrayDiffDesc.B_HAS, "2"),
            ArrayDiff("arr", ArrayDiffDesc.A_MISSES, "2"),
        ],
    )

    markdown = render_markdown(result, unordered)

    assert markdown.splitlines() == [
        "### Key differences",
        "- `x`: present in a.json, missing from b.json",
        "### Type differences",
        "- `n`: string → number",
        "### Value differences",
        "- `n`: s → 5",
        "### Array differences",
        "- `arr`: b.json has 2",
        "- `arr`: a.json misses 2",
    ]


def test_render_markdown_without_differences(unordered: WorkingContext) -> None:
    assert render_markdown(ComparisonResult(), unordered) == "No differences detected."


def test_result_to_payload(ordered: WorkingContext) -> None:
    payload = result_to_payload(ComparisonResult(type_diffs=[TypeDiff("k", "null", "bool")]), ordered)

    assert payload["summary"] == {
        "key_diffs": 0,
        "type_diffs": 1,
        "value_diffs": 0,
        "array_diffs": 0,
        "total": 1,
        "file_a": "a.json",
        "file_b": "b.json",
        "array_same_order": True,
    }
    assert payload["type_diffs"] == [{"key": "k", "type1": "null", "type2": "bool"}]
