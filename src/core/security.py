"""Admin identity resolution backed by the signed session cookie."""

import logging
import secrets
from fastapi import Request
from pydantic import BaseModel, ConfigDict

from src.core.config import Settings
from src.core.exceptions import UnauthorizedException

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user_email"


class AdminIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def check_credentials(settings: Settings, email: str, password: str) -> bool:
    email_ok = secrets.compare_digest(email.encode(), settings.ADMIN_EMAIL.encode())
    password_ok = secrets.compare_digest(
        password.encode(), settings.ADMIN_PASSWORD.encode()
    )
    return email_ok and password_ok


def require_admin(request: Request) -> AdminIdentity:
    """Resolve the request to the admin identity or raise Unauthorized."""
    settings = get_settings(request)
    email = request.session.get(SESSION_USER_KEY)
    if not email:
        raise UnauthorizedException("Authentication required")
    if email != settings.ADMIN_EMAIL:
        logger.warning("Non-admin session rejected on %s", request.url.path)
        raise UnauthorizedException("Admin access required")
    return AdminIdentity(email=email)
