from __future__ import annotations

import math
from typing import Any

from atsmatch.core.config.scoring import get_scoring_value


def _clamp_int(value: Any, default: int, min_value: int, max_value: int) -> int:
    try:
        parsed = int(float(value))
    except (TypeError, ValueError):
        return default
    return max(min_value, min(max_value, parsed))


def _clamp_float(value: Any, default: float, min_value: float, max_value: float) -> float:
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default
    return max(min_value, min(max_value, parsed))


def config_int(path: str, default: int, min_value: int = 0, max_value: int = 10_000) -> int:
    return _clamp_int(get_scoring_value(path, default), default=default, min_value=min_value, max_value=max_value)


def config_float(path: str, default: float, min_value: float = 0.0, max_value: float = 100.0) -> float:
    return _clamp_float(get_scoring_value(path, default), default=default, min_value=min_value, max_value=max_value)


def config_range(path: str, default: tuple[int, int]) -> tuple[int, int]:
    raw = get_scoring_value(path, list(default))
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        return default
    low = _clamp_int(raw[0], default=default[0], min_value=0, max_value=100_000)
    high = _clamp_int(raw[1], default=default[1], min_value=0, max_value=100_000)
    return (low, high) if low <= high else default


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def ratio_score(part: int, whole: int, empty: int = 100) -> int:
    """Percentage of `part` in `whole`, capped at 100; `empty` when there is nothing to measure."""
    if whole <= 0:
        return empty
    return min(100, round_half_up(part / whole * 100))
