"""Post service."""

import logging
from typing import Dict, List, Mapping, Optional

from src.core import exceptions
from src.core.bases.base_service import BaseService
from src.core.markdown import render_markdown
from src.apps.blog.repositories.post_repository import PostRepository
from src.apps.blog.models.post import Post
from src.apps.blog.schemas.post import (
    ADMIN_INDEX_URL,
    NEW_POST_SLUG,
    AdminPostIndex,
    AdminPostLink,
    Intent,
    PostCreate,
    PostFormSeed,
    PostRead,
    PostSummary,
    PostView,
    parse_intent,
    parse_post_form,
)

logger = logging.getLogger(__name__)


class PostService(BaseService[Post]):
    """Post service class."""
    
    def __init__(self, repository: PostRepository):
        super().__init__(repository)
        self.repository: PostRepository = repository

    # ----------------- PUBLIC ----------------- #
    async def list_summaries(self) -> List[PostSummary]:
        with self._repository_errors("list"):
            return await self.repository.list_summaries()

    async def render_post(self, slug: Optional[str]) -> PostView:
        """Resolve ``slug`` to a post and render its markdown."""
        if not slug:
            raise exceptions.MissingParameterException("slug is required!")

        with self._repository_errors("get"):
            post = await self.repository.get_by_slug(slug)
        if post is None:
            raise exceptions.NotFoundException("Post not found!")

        return PostView(title=post.title, html=render_markdown(post.markdown))

    # ----------------- ADMIN ----------------- #
    async def admin_index(self) -> AdminPostIndex:
        """Every post with its edit and view links, plus the new-post link."""
        summaries = await self.list_summaries()
        return AdminPostIndex(
            new_post_url=f"{ADMIN_INDEX_URL}/{NEW_POST_SLUG}",
            posts=[AdminPostLink.from_summary(summary) for summary in summaries],
        )

    async def get_form_seed(self, slug: Optional[str]) -> PostFormSeed:
        if not slug:
            raise exceptions.MissingParameterException("slug is required!")
        if slug == NEW_POST_SLUG:
            return PostFormSeed()

        with self._repository_errors("get"):
            post = await self.repository.get_by_slug(slug)
        if post is None:
            raise exceptions.NotFoundException("Post not found!")
        return PostFormSeed(post=PostRead.model_validate(post, from_attributes=True))

    async def submit(
        self, route_slug: Optional[str], form: Mapping[str, object]
    ) -> Optional[Dict[str, Optional[str]]]:
        """Apply an admin form submission.

        Returns the per-field error map when the form is incomplete, None once
        the requested mutation has been stored.
        """
        if not route_slug:
            raise exceptions.MissingParameterException("slug is required!")

        intent = parse_intent(form.get("intent"), route_slug)
        if intent is None:
            raise exceptions.BadRequestException(
                f"Unknown intent {form.get('intent')!r}"
            )

        if intent is Intent.DELETE:
            await self.delete(route_slug)
            return None

        result = parse_post_form(form)
        if result.post is None:
            return result.errors

        if route_slug == NEW_POST_SLUG:
            await self.create(result.post)
        else:
            await self.update(route_slug, result.post)
        return None

    async def create(self, post: PostCreate) -> Post:
        with self._repository_errors("create"):
            created = await self.repository.create(post)
        logger.info("Created post %r", created.slug)
        return created

    async def update(self, slug: str, post: PostCreate) -> Post:
        with self._repository_errors("update"):
            updated = await self.repository.update(slug, post)
        if updated.slug != slug:
            logger.info("Updated post %r (slug changed to %r)", slug, updated.slug)
        else:
            logger.info("Updated post %r", slug)
        return updated

    async def delete(self, slug: str) -> None:
        with self._repository_errors("delete"):
            await self.repository.delete(slug)
        logger.info("Deleted post %r", slug)
