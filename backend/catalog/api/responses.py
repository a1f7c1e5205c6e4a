"""Response Classes — pretty-printed JSON for product payloads."""

import json
from typing import Any

from fastapi.responses import JSONResponse


class PrettyJSONResponse(JSONResponse):
    """application/json body indented by two spaces."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content, ensure_ascii=False, allow_nan=False, indent=2,
        ).encode("utf-8")
