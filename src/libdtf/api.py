"""Public API for comparing two documents."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping

from .array_checker import find_array_diffs
from .diff_types import ComparisonResult, Config, WorkingContext, WorkingFile
from .key_checker import find_key_diffs
from .loader import load_reference
from .type_checker import find_type_diffs
from .value_checker import find_value_diffs
from .values import ensure_object

logger = logging.getLogger(__name__)

Checker = Callable[[str, Mapping[str, Any], Mapping[str, Any], WorkingContext], List[Any]]

CHECKERS: Dict[str, Checker] = {
    "key_diffs": find_key_diffs,
    "type_diffs": find_type_diffs,
    "value_diffs": find_value_diffs,
    "array_diffs": find_array_diffs,
}


def compare(
    a: Mapping[str, Any],
    b: Mapping[str, Any],
    working_context: WorkingContext,
    *,
    parallel: bool = False,
) -> ComparisonResult:
    """Run all four comparators against the document roots ``a`` and ``b``.

    The comparators share nothing but read-only inputs, so with
    ``parallel=True`` each one runs on its own worker thread.
    """

    ensure_object(a)
    ensure_object(b)

    if parallel:
        with ThreadPoolExecutor(max_workers=len(CHECKERS), thread_name_prefix="libdtf") as pool:
            futures = {
                name: pool.submit(checker, "", a, b, working_context)
                for name, checker in CHECKERS.items()
            }
            diffs = {name: future.result() for name, future in futures.items()}
    else:
        diffs = {name: checker("", a, b, working_context) for name, checker in CHECKERS.items()}

    result = ComparisonResult(**diffs)
    logger.debug(
        "Compared %s with %s",
        working_context.file_a.name,
        working_context.file_b.name,
        extra={"counts": result.counts(), "array_same_order": working_context.config.array_same_order},
    )
    return result


def compare_files(
    path_a: Any,
    path_b: Any,
    config: Config | None = None,
    *,
    parallel: bool = False,
) -> ComparisonResult:
    """Load two documents (paths or parsed mappings) and compare them.

    File paths double as the labels of the run; parsed mappings are labelled
    ``a`` and ``b``.
    """

    working_context = WorkingContext(
        WorkingFile(_label(path_a, "a")),
        WorkingFile(_label(path_b, "b")),
        config or Config(),
    )
    return compare(
        load_reference(path_a),
        load_reference(path_b),
        working_context,
        parallel=parallel,
    )


def _label(ref: Any, fallback: str) -> str:
    if isinstance(ref, (str, Path)):
        return str(ref)
    return fallback


__all__ = ["CHECKERS", "compare", "compare_files"]
