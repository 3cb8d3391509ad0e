"""Post repository."""

from typing import List, Optional

from src.core.bases.base_repository import BaseRepository
from src.apps.blog.models.post import Post
from src.apps.blog.schemas.post import PostCreate, PostSummary


class PostRepository(BaseRepository[Post]):
    """Post repository class, keyed by slug."""
    
    model = Post
    key = "slug"

    async def list_summaries(self) -> List[PostSummary]:
        rows = await self.get_columns("slug", "title")
        return [PostSummary(**row) for row in rows]

    async def list_all(self) -> List[Post]:
        return await self.get_all()

    async def get_by_slug(self, slug: str) -> Optional[Post]:
        return await self.get(slug)

    async def update(self, slug: str, post: PostCreate) -> Post:
        return await self.replace(slug, post)

    async def delete(self, slug: str) -> None:
        await self.force_delete(slug)
