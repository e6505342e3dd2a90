"""Coercion of values into strict JSON."""

from __future__ import annotations

import math
from typing import Any


def finite_or_null(value: Any) -> Any:
    """Return *value* with every NaN and infinity replaced by ``None``.

    Strict JSON has no token for non-finite numbers, so they are written
    as ``null``. Containers are copied; other values pass through.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: finite_or_null(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [finite_or_null(v) for v in value]
    return value
