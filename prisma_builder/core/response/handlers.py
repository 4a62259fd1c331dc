import logging
from typing import Any, List, Optional

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from prisma_builder.core import exceptions
from prisma_builder.core.response.schemas import BaseResponse, ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def success_response(
    data: Any = None,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    body = BaseResponse[Any](data=jsonable_encoder(data), message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def error_response(
    error_code: str,
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    error_details: Optional[List[ErrorDetail]] = None,
) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        error_code=error_code,
        error_details=error_details or [],
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def exception_response(exc: exceptions.AppException) -> JSONResponse:
    """Build the error envelope for one of our own exceptions."""
    details = []
    if exc.target:
        details.append(
            ErrorDetail(
                field=exc.target,
                code=exc.error_code,
                message=str(exc.detail),
                target=exc.target,
            )
        )
    return error_response(
        error_code=exc.error_code,
        message=str(exc.detail),
        status_code=exc.status_code,
        error_details=details,
    )


async def app_exception_handler(
    request: Request, exc: exceptions.AppException
) -> JSONResponse:
    logger.info("%s on %s: %s", exc.error_code, request.url.path, exc.detail)
    return exception_response(exc)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return error_response(
        error_code="INTERNAL_ERROR",
        message="Internal Server Error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
