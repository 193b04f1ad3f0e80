"""Response helpers shared by the router and the error handlers."""

from __future__ import annotations

import json
from typing import Any

from fastapi.responses import JSONResponse

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, DELETE",
    "Access-Control-Allow-Headers": "Content-Type",
}


class PrettyJSONResponse(JSONResponse):
    """JSON with 2-space indentation, matching the on-disk format."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")
