from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.utils import total_pages


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    totalPages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, totalPages=total_pages(total, limit))


def success(
    data: Any = None,
    *,
    message: Optional[str] = None,
    pagination: Optional[Pagination] = None,
    status_code: int = 200,
) -> JSONResponse:
    """Wrap a payload in the ``{success, data, message, pagination}`` envelope."""
    body = {"success": True}
    if data is not None:
        body["data"] = data
    if message is not None:
        body["message"] = message
    if pagination is not None:
        body["pagination"] = pagination
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def failure(
    status_code: int, message: str, error: Any = None
) -> JSONResponse:
    body = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))
