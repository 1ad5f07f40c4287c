"""Structural comparison of JSON and YAML documents."""
from __future__ import annotations

from .api import compare, compare_files
from .array_checker import find_array_diffs
from .diff_types import (
    ArrayDiff,
    ArrayDiffDesc,
    ComparisonResult,
    Config,
    KeyDiff,
    TypeDiff,
    ValueDiff,
    WorkingContext,
    WorkingFile,
)
from .errors import ConfigError, ContractViolationError, DocumentLoadError, LibdtfError
from .key_checker import find_key_diffs
from .loader import load_document, read_json_file, read_yaml_file
from .type_checker import find_type_diffs
from .value_checker import find_value_diffs
from .values import ValueType

__all__ = [
    "ArrayDiff",
    "ArrayDiffDesc",
    "ComparisonResult",
    "Config",
    "ConfigError",
    "ContractViolationError",
    "DocumentLoadError",
    "KeyDiff",
    "LibdtfError",
    "TypeDiff",
    "ValueDiff",
    "ValueType",
    "WorkingContext",
    "WorkingFile",
    "compare",
    "compare_files",
    "find_array_diffs",
    "find_key_diffs",
    "find_type_diffs",
    "find_value_diffs",
    "load_document",
    "read_json_file",
    "read_yaml_file",
]

__version__ = "0.1.0"
