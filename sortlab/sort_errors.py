"""
Sorting errors and limits.
"""

from __future__ import annotations

import os
from typing import Any, Iterable, Optional

DEFAULT_ARRAY_SIZE = 1000
DEFAULT_QUADRATIC_LIMIT = 20000


class InvalidBoundsError(ValueError):
    """
    Raised when a random fixture is requested with a negative length or an
    empty value range.
    """

    def __init__(
        self,
        message: str,
        *,
        length: int | None = None,
        min_value: int | None = None,
        max_value: int | None = None,
    ) -> None:
        super().__init__(message)
        self.length = length
        self.min_value = min_value
        self.max_value = max_value


class UnknownStrategyError(LookupError):
    """
    Raised for a pivot strategy or sorter name that is not registered.
    """

    def __init__(self, name: str, choices: Iterable[str] = (), *, kind: str = "strategy") -> None:
        self.name = name
        self.kind = kind
        self.choices = tuple(choices)
        super().__init__(f"Unknown {kind} {name!r}; expected one of {', '.join(self.choices)}")


def _resolve_positive_int(raw: Any, env_name: str, default: int) -> int:
    if raw is None:
        raw = os.getenv(env_name)
    if raw is None:
        return default

    try:
        value = int(raw)
        if value > 0:
            return value
    except (TypeError, ValueError):
        pass
    return default


def resolve_array_size(raw: Optional[Any] = None) -> int:
    """
    Resolve the benchmark fixture size.

    Priority:
    1) explicit value
    2) env SORTLAB_SIZE
    3) DEFAULT_ARRAY_SIZE
    """
    return _resolve_positive_int(raw, "SORTLAB_SIZE", DEFAULT_ARRAY_SIZE)


def resolve_quadratic_limit(raw: Optional[Any] = None) -> int:
    """
    Resolve the largest input size an O(n^2) sorter is benchmarked on.

    Priority:
    1) explicit value
    2) env SORTLAB_QUADRATIC_LIMIT
    3) DEFAULT_QUADRATIC_LIMIT
    """
    return _resolve_positive_int(raw, "SORTLAB_QUADRATIC_LIMIT", DEFAULT_QUADRATIC_LIMIT)
