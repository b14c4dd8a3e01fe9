"""The uniform response envelope returned by every endpoint."""
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def envelope(data: Any = None, meta: Optional[dict] = None) -> dict:
    content: dict = {"data": data}
    if meta is not None:
        content["meta"] = meta
    return {"status": True, "content": content}


def list_envelope(items: list) -> dict:
    """Unpaged listings report a single page."""
    return envelope(items, {"total": len(items), "pages": 1, "page": 1})


def error_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"status": False, "error": message}),
        headers=headers
    )
