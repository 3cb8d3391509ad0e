"""Admin post router."""

from fastapi import Depends, Request, status
from fastapi.responses import RedirectResponse

from src.core.bases.base_router import BaseRouter
from src.core.response.handlers import error_response, success_response
from src.core.security import require_admin
from src.apps.blog.routers.post_router import get_post_service
from src.apps.blog.schemas.post import ADMIN_INDEX_URL
from src.apps.blog.services.post_service import PostService


class AdminPostRouter(BaseRouter):
    """Admin routes; every request must resolve to the admin identity."""
    
    def __init__(self):
        super().__init__(
            prefix=ADMIN_INDEX_URL,
            tags=["Posts admin"],
            dependencies=[Depends(require_admin)],
        )

    def _register_routes(self) -> None:
        self._register_index()
        self._register_form()
        self._register_submit()

    def _register_index(self) -> None:
        @self.router.get("", summary="List posts for editing")
        async def admin_index(service: PostService = Depends(get_post_service)):
            index = await service.admin_index()
            return success_response(data=index, message="Posts retrieved successfully")

    def _register_form(self) -> None:
        @self.router.get(
            "/{slug}",
            summary="Populate the post form",
            responses={
                200: {"description": "Form seed; empty for the 'new' slug"},
                401: {"description": "Not signed in as admin"},
                404: {"description": "Post not found"},
            },
        )
        async def post_form(slug: str, service: PostService = Depends(get_post_service)):
            seed = await service.get_form_seed(slug)
            return success_response(data=seed)

    def _register_submit(self) -> None:
        @self.router.post(
            "/{slug}",
            summary="Create, update or delete a post",
            responses={
                200: {"description": "Form rejected, field errors returned"},
                303: {"description": "Mutation stored, redirect to admin index"},
                401: {"description": "Not signed in as admin"},
                404: {"description": "Post not found"},
                409: {"description": "Slug already taken"},
            },
        )
        async def submit_post(
            slug: str,
            request: Request,
            service: PostService = Depends(get_post_service),
        ):
            form = await request.form()
            errors = await service.submit(slug, form)
            if errors is not None:
                return error_response(
                    error_code="VALIDATION_ERROR",
                    message="Some required fields are missing",
                    status_code=status.HTTP_200_OK,
                    details=[
                        {"field": field, "code": "REQUIRED", "message": message}
                        for field, message in errors.items()
                        if message
                    ],
                    data=errors,
                )
            return RedirectResponse(ADMIN_INDEX_URL, status_code=status.HTTP_303_SEE_OTHER)


# Router instance
router = AdminPostRouter().get_router()
