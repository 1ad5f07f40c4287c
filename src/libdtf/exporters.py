"""Export comparison payloads to JSON and Excel."""
from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Dict, List, Mapping

import pandas as pd

from .diff_types import ComparisonResult, WorkingContext
from .report import result_to_payload

_SUPPORTED_FORMATS = {"json", "excel"}

_SHEETS = (
    ("key_diffs", "Key Differences"),
    ("type_diffs", "Type Differences"),
    ("value_diffs", "Value Differences"),
    ("array_diffs", "Array Differences"),
)


class JSONExporter:
    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export(self, data: Dict[str, Any], filename: str = "diff_results.json") -> Path:
        output_path = self.output_dir / filename
        with output_path.open("w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2, ensure_ascii=False)
        return output_path


class ExcelExporter:
    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export(self, data: Dict[str, Any], filename: str = "diff_results.xlsx") -> Path:
        output_path = self.output_dir / filename
        with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
            self._write_summary_sheet(data.get("summary", {}), writer)
            for key, sheet_name in _SHEETS:
                self._write_table_sheet(data.get(key, []), sheet_name, writer)
        return output_path

    def _write_summary_sheet(self, summary: Mapping[str, Any], writer: pd.ExcelWriter) -> None:
        df = pd.DataFrame([dict(summary)]) if summary else pd.DataFrame()
        df.to_excel(writer, sheet_name="Summary", index=False)

    def _write_table_sheet(
        self,
        items: List[Dict[str, Any]],
        sheet_name: str,
        writer: pd.ExcelWriter,
    ) -> None:
        df = pd.DataFrame(items) if items else pd.DataFrame()
        df.to_excel(writer, sheet_name=sheet_name[:31], index=False)


def _normalise_formats(formats: Iterable[str] | None) -> set[str]:
    if formats is None:
        return set(_SUPPORTED_FORMATS)
    requested = {fmt.strip().lower() for fmt in formats if fmt}
    invalid = requested - _SUPPORTED_FORMATS
    if invalid:
        raise ValueError(f"Unsupported export formats requested: {sorted(invalid)}")
    return requested or set(_SUPPORTED_FORMATS)


def export_all(
    result: ComparisonResult,
    working_context: WorkingContext | None = None,
    *,
    out_dir: str | Path | None,
    formats: Iterable[str] | None = None,
    filenames: Mapping[str, str | Path] | None = None,
) -> Dict[str, Path]:
    """Export ``result`` to the requested formats.

    Explicit ``filenames`` (keyed by format) win over ``out_dir`` defaults.
    """

    payload = result_to_payload(result, working_context)
    requested_formats = _normalise_formats(formats)
    base_dir = Path(out_dir) if out_dir is not None else None

    def _resolve(name: str, default: str) -> Path:
        if filenames and name in filenames:
            path = Path(filenames[name]).resolve()
            path.parent.mkdir(parents=True, exist_ok=True)
            return path
        if base_dir is None:
            raise ValueError(
                "`out_dir` must be provided when explicit filenames are not supplied"
            )
        base_dir.mkdir(parents=True, exist_ok=True)
        return (base_dir / default).resolve()

    outputs: Dict[str, Path] = {}

    if "json" in requested_formats:
        json_path = _resolve("json", "diff_results.json")
        outputs["json"] = JSONExporter(json_path.parent).export(payload, json_path.name)
    if "excel" in requested_formats:
        excel_path = _resolve("excel", "diff_results.xlsx")
        outputs["excel"] = ExcelExporter(excel_path.parent).export(payload, excel_path.name)

    return outputs


__all__ = ["JSONExporter", "ExcelExporter", "export_all"]
