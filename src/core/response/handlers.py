import logging
from typing import Any, List, Optional

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from src.core.exceptions import ServiceException
from src.core.response import schemas

logger = logging.getLogger(__name__)


def success_response(
    data: Any = None,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    body = schemas.BaseResponse(success=True, message=message, data=data)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def list_response(items: List[Any], message: Optional[str] = None) -> JSONResponse:
    body = schemas.ListResponse(data=items, total=len(items), message=message)
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(body))


def error_response(
    error_code: str,
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    details: Optional[List[dict]] = None,
    data: Any = None,
) -> JSONResponse:
    body = schemas.ErrorResponse(
        message=message,
        error_code=error_code,
        error_details=[schemas.ErrorDetail(**d) for d in details or []],
        data=data,
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def service_exception_handler(request: Request, exc: ServiceException) -> JSONResponse:
    return error_response(
        error_code=exc.error_code,
        message=str(exc.detail),
        status_code=exc.status_code,
        details=[detail.model_dump() for detail in exc.error_details],
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        error_code="INTERNAL_ERROR",
        message="Internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
