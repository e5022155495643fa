"""JSON response classes selected per deployment environment."""

from __future__ import annotations

import json
from typing import Any

from fastapi.responses import JSONResponse


class PrettyJSONResponse(JSONResponse):
    """JSON response indented for human readers, used in development."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=2,
            separators=(",", ": "),
        ).encode("utf-8")


def response_class_for(pretty: bool) -> type[JSONResponse]:
    return PrettyJSONResponse if pretty else JSONResponse
