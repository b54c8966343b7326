"""Internal shared utilities for jpcontext."""

from __future__ import annotations

#: Default maximum number of bytes examined by the convenience API and the
#: streaming detector.
DEFAULT_MAX_BYTES: int = 200_000

#: Relations that must be exceeded before a confidence is reported.
MINIMUM_DATA_THRESHOLD: int = 4


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_max_bytes(max_bytes: int) -> None:
    """Raise ValueError if *max_bytes* is not a positive integer."""
    if not _is_int(max_bytes) or max_bytes < 1:
        msg = "max_bytes must be a positive integer"
        raise ValueError(msg)


def _validate_min_relations(min_relations: int) -> None:
    """Raise ValueError if *min_relations* is not a non-negative integer."""
    if not _is_int(min_relations) or min_relations < 0:
        msg = "min_relations must be a non-negative integer"
        raise ValueError(msg)


def _validate_max_relations(max_relations: int) -> None:
    """Raise ValueError if *max_relations* is not a positive integer."""
    if not _is_int(max_relations) or max_relations < 1:
        msg = "max_relations must be a positive integer"
        raise ValueError(msg)
