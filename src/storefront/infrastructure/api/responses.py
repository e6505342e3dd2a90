"""JSON response class that never emits non-standard number tokens."""

from __future__ import annotations

import json
from typing import Any

from fastapi.responses import JSONResponse

from storefront.infrastructure.json_values import finite_or_null


class StrictJSONResponse(JSONResponse):
    """Renders NaN and infinities as ``null``, as stored on disk."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            finite_or_null(content),
            ensure_ascii=False,
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
        ).encode("utf-8")
