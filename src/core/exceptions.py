from typing import List, Optional

from fastapi import HTTPException, status

from src.core.response.schemas import ErrorDetail


class ServiceException(HTTPException):
    """Base exception for errors surfaced to the caller as an error envelope."""

    error_code: str = "SERVICE_ERROR"
    status_code_default: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        detail: str = "Service error",
        error_details: Optional[List[ErrorDetail]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(status_code=status_code or self.status_code_default, detail=detail)
        self.error_details = error_details or []


class MissingParameterException(ServiceException):
    error_code = "MISSING_PARAMETER"
    status_code_default = status.HTTP_400_BAD_REQUEST


class BadRequestException(ServiceException):
    error_code = "BAD_REQUEST"
    status_code_default = status.HTTP_400_BAD_REQUEST


class UnauthorizedException(ServiceException):
    error_code = "UNAUTHORIZED"
    status_code_default = status.HTTP_401_UNAUTHORIZED


class NotFoundException(ServiceException):
    error_code = "NOT_FOUND"
    status_code_default = status.HTTP_404_NOT_FOUND


class ConflictException(ServiceException):
    error_code = "CONFLICT"
    status_code_default = status.HTTP_409_CONFLICT

