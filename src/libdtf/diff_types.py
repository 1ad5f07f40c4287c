"""Run context and diff record types."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List


@dataclass(frozen=True)
class Config:
    """Comparison switches for one run.

    ``array_same_order`` selects positional array comparison in the key, type
    and value comparators and disables the array comparator entirely.
    """

    array_same_order: bool = False


@dataclass(frozen=True)
class WorkingFile:
    """Label for one side of a comparison, usually the source file path."""

    name: str


@dataclass(frozen=True)
class WorkingContext:
    file_a: WorkingFile
    file_b: WorkingFile
    config: Config = field(default_factory=Config)

    @classmethod
    def from_names(cls, name_a: str, name_b: str, *, array_same_order: bool = False) -> "WorkingContext":
        return cls(WorkingFile(name_a), WorkingFile(name_b), Config(array_same_order))


class ArrayDiffDesc(str, Enum):
    """Which side of an unordered array comparison holds or lacks a value."""

    A_HAS = "AHas"
    A_MISSES = "AMisses"
    B_HAS = "BHas"
    B_MISSES = "BMisses"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class KeyDiff:
    """File ``has`` contains ``key``; file ``misses`` does not."""

    key: str
    has: str
    misses: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TypeDiff:
    key: str
    type1: str
    type2: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ValueDiff:
    key: str
    value1: str
    value2: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ArrayDiff:
    key: str
    descriptor: ArrayDiffDesc
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "descriptor": self.descriptor.value, "value": self.value}


@dataclass(frozen=True)
class ComparisonResult:
    """The four diff lists produced by one comparison run."""

    key_diffs: List[KeyDiff] = field(default_factory=list)
    type_diffs: List[TypeDiff] = field(default_factory=list)
    value_diffs: List[ValueDiff] = field(default_factory=list)
    array_diffs: List[ArrayDiff] = field(default_factory=list)

    @property
    def total(self) -> int:
        return (
            len(self.key_diffs)
            + len(self.type_diffs)
            + len(self.value_diffs)
            + len(self.array_diffs)
        )

    def is_empty(self) -> bool:
        return self.total == 0

    def counts(self) -> Dict[str, int]:
        return {
            "key_diffs": len(self.key_diffs),
            "type_diffs": len(self.type_diffs),
            "value_diffs": len(self.value_diffs),
            "array_diffs": len(self.array_diffs),
        }


__all__ = [
    "Config",
    "WorkingFile",
    "WorkingContext",
    "ArrayDiffDesc",
    "KeyDiff",
    "TypeDiff",
    "ValueDiff",
    "ArrayDiff",
    "ComparisonResult",
]
