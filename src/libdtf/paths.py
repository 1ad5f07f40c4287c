"""Diagnostic key paths such as ``a.b[2].c``.

No escaping is performed: a key that itself contains ``.`` or ``[`` cannot be
told apart from a path separator.
"""
from __future__ import annotations


def format_key(prefix: str, local_key: str) -> str:
    if not prefix:
        return local_key
    return f"{prefix}.{local_key}"


def format_index(key: str, index: int) -> str:
    return f"{key}[{index}]"


__all__ = ["format_key", "format_index"]
