"""Post router."""

from fastapi import Depends, Request

from src.core.bases.base_router import BaseRouter
from src.core.response.handlers import list_response, success_response
from src.apps.blog.services.post_service import PostService
from src.apps.blog.repositories.post_repository import PostRepository


def get_post_repository(request: Request) -> PostRepository:
    """Get post repository instance bound to the application's database."""
    database = request.app.state.database
    return PostRepository(database.get_session, now=database.now)


def get_post_service(repository: PostRepository = Depends(get_post_repository)) -> PostService:
    """Get post service instance."""
    return PostService(repository)


class PostRouter(BaseRouter):
    """Public, read-only post routes."""
    
    def __init__(self):
        super().__init__(prefix="/posts", tags=["Posts"])

    def _register_routes(self) -> None:
        self._register_list()
        self._register_read()

    def _register_list(self) -> None:
        """Register GET / route."""
        @self.router.get(
            "",
            summary="List posts",
            responses={200: {"description": "Posts retrieved successfully"}},
        )
        async def list_posts(service: PostService = Depends(get_post_service)):
            items = await service.list_summaries()
            return list_response(items=items, message="Posts retrieved successfully")

    def _register_read(self) -> None:
        """Register GET /{slug} route."""
        @self.router.get(
            "/{slug}",
            summary="Read a rendered post",
            responses={
                200: {"description": "Post rendered successfully"},
                404: {"description": "Post not found"},
            },
        )
        async def read_post(slug: str, service: PostService = Depends(get_post_service)):
            view = await service.render_post(slug)
            return success_response(data=view, message="Post rendered successfully")


# Router instance
router = PostRouter().get_router()
