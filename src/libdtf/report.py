"""Render comparison results for people and for other tools."""
from __future__ import annotations

from typing import Any, Dict, List

from .diff_types import ArrayDiffDesc, ComparisonResult, WorkingContext


def result_to_payload(result: ComparisonResult, working_context: WorkingContext | None = None) -> Dict[str, Any]:
    """Return a JSON-serializable mapping for ``result``."""

    summary: Dict[str, Any] = dict(result.counts())
    summary["total"] = result.total
    if working_context is not None:
        summary["file_a"] = working_context.file_a.name
        summary["file_b"] = working_context.file_b.name
        summary["array_same_order"] = working_context.config.array_same_order

    return {
        "summary": summary,
        "key_diffs": [diff.to_dict() for diff in result.key_diffs],
        "type_diffs": [diff.to_dict() for diff in result.type_diffs],
        "value_diffs": [diff.to_dict() for diff in result.value_diffs],
        "array_diffs": [diff.to_dict() for diff in result.array_diffs],
    }


def _file_for(descriptor: ArrayDiffDesc, working_context: WorkingContext) -> str:
    if descriptor in (ArrayDiffDesc.A_HAS, ArrayDiffDesc.A_MISSES):
        return working_context.file_a.name
    return working_context.file_b.name


def render_markdown(result: ComparisonResult, working_context: WorkingContext) -> str:
    """Render a markdown bullet summary for a comparison."""

    lines: List[str] = []

    if result.key_diffs:
        lines.append("### Key differences")
        for key_diff in result.key_diffs:
            lines.append(f"- `{key_diff.key}`: present in {key_diff.has}, missing from {key_diff.misses}")

    if result.type_diffs:
        lines.append("### Type differences")
        for type_diff in result.type_diffs:
            lines.append(f"- `{type_diff.key}`: {type_diff.type1} → {type_diff.type2}")

    if result.value_diffs:
        lines.append("### Value differences")
        for value_diff in result.value_diffs:
            lines.append(f"- `{value_diff.key}`: {value_diff.value1} → {value_diff.value2}")

    if result.array_diffs:
        lines.append("### Array differences")
        for array_diff in result.array_diffs:
            if array_diff.descriptor in (ArrayDiffDesc.A_HAS, ArrayDiffDesc.B_HAS):
                verb = "has"
            else:
                verb = "misses"
            owner = _file_for(array_diff.descriptor, working_context)
            lines.append(f"- `{array_diff.key}`: {owner} {verb} {array_diff.value}")

    if not lines:
        return "No differences detected."
    return "\n".join(lines)


__all__ = ["result_to_payload", "render_markdown"]
