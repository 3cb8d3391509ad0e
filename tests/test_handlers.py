import json

import pytest
from pydantic import ValidationError

from src.core import exceptions
from src.core.response.handlers import service_exception_handler
from src.core.response.schemas import ErrorDetail
from src.core.security import AdminIdentity


@pytest.mark.parametrize(
    "exc_class,status_code,error_code",
    [
        (exceptions.MissingParameterException, 400, "MISSING_PARAMETER"),
        (exceptions.BadRequestException, 400, "BAD_REQUEST"),
        (exceptions.UnauthorizedException, 401, "UNAUTHORIZED"),
        (exceptions.NotFoundException, 404, "NOT_FOUND"),
        (exceptions.ConflictException, 409, "CONFLICT"),
        (exceptions.ServiceException, 500, "SERVICE_ERROR"),
    ],
)
@pytest.mark.asyncio
async def test_service_exceptions_render_error_envelope(exc_class, status_code, error_code):
    exc = exc_class("went wrong", error_details=[ErrorDetail(field="slug", code="X", message="m")])

    response = await service_exception_handler(None, exc)

    assert response.status_code == status_code
    body = json.loads(response.body)
    assert body["success"] is False
    assert body["error_code"] == error_code
    assert body["message"] == "went wrong"
    assert body["error_details"][0]["field"] == "slug"


def test_every_service_exception_is_mapped():
    subclasses = {cls.__name__ for cls in exceptions.ServiceException.__subclasses__()}
    assert subclasses == {
        "MissingParameterException",
        "BadRequestException",
        "UnauthorizedException",
        "NotFoundException",
        "ConflictException",
    }


def test_admin_identity_is_immutable():
    identity = AdminIdentity(email="admin@example.com")

    with pytest.raises(ValidationError):
        identity.email = "other@example.com"
