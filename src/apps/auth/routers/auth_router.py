"""Session login for the admin."""

import logging

from fastapi import Request, status
from fastapi.responses import RedirectResponse

from src.core.bases.base_router import BaseRouter
from src.core.exceptions import UnauthorizedException
from src.core.security import SESSION_USER_KEY, check_credentials, get_settings

logger = logging.getLogger(__name__)


class AuthRouter(BaseRouter):
    def __init__(self):
        super().__init__(tags=["Auth"])

    def _register_routes(self) -> None:
        @self.router.post("/login", summary="Sign in as admin")
        async def login(request: Request):
            form = await request.form()
            email = form.get("email")
            password = form.get("password")
            if not isinstance(email, str) or not isinstance(password, str):
                raise UnauthorizedException("Email and password are required")

            if not check_credentials(get_settings(request), email, password):
                logger.warning("Failed admin login for %r", email)
                raise UnauthorizedException("Invalid email or password")

            request.session[SESSION_USER_KEY] = email
            return RedirectResponse("/posts/admin", status_code=status.HTTP_303_SEE_OTHER)

        @self.router.post("/logout", summary="Sign out")
        async def logout(request: Request):
            request.session.clear()
            return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


# Router instance
router = AuthRouter().get_router()
