"""
Realty API - Response envelope
"""
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

_MISSING = object()


def success_response(
    message: str,
    data: Any = _MISSING,
    status_code: int = status.HTTP_200_OK
) -> JSONResponse:
    """Envelope de sucesso: {success, data, message}"""
    content = {"success": True}
    if data is not _MISSING:
        content["data"] = jsonable_encoder(data)
    content["message"] = message
    return JSONResponse(status_code=status_code, content=content)
