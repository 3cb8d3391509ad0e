from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from src.apps.blog.models.post import Post
from src.apps.blog.repositories.post_repository import PostRepository
from src.apps.blog.schemas.post import PostCreate, PostSummary
from src.core.bases.base_repository import DuplicateKeyError, RecordNotFoundError


def make_post(slug="hello", title="Hello", markdown="# Hi"):
    return PostCreate(slug=slug, title=title, markdown=markdown)


@pytest.mark.asyncio
async def test_create_then_get_returns_same_fields(repository):
    await repository.create(make_post())

    post = await repository.get_by_slug("hello")

    assert post is not None
    assert (post.slug, post.title, post.markdown) == ("hello", "Hello", "# Hi")
    assert post.created_at is not None


@pytest.mark.asyncio
async def test_get_missing_slug_returns_none(repository):
    assert await repository.get_by_slug("nope") is None


@pytest.mark.asyncio
async def test_duplicate_slug_is_rejected(repository):
    await repository.create(make_post())

    with pytest.raises(DuplicateKeyError):
        await repository.create(make_post(title="Another"))

    posts = await repository.list_all()
    assert [p.title for p in posts] == ["Hello"]


@pytest.mark.asyncio
async def test_update_can_change_slug(repository):
    await repository.create(make_post())

    await repository.update(
        "hello", make_post(slug="hello-again", title="Hello again", markdown="Body")
    )

    assert await repository.get_by_slug("hello") is None
    updated = await repository.get_by_slug("hello-again")
    assert (updated.title, updated.markdown) == ("Hello again", "Body")
    assert updated.updated_at is not None


@pytest.mark.asyncio
async def test_update_keeping_slug_replaces_fields(repository):
    await repository.create(make_post())

    await repository.update("hello", make_post(title="Changed", markdown="New"))

    post = await repository.get_by_slug("hello")
    assert (post.title, post.markdown) == ("Changed", "New")


@pytest.mark.asyncio
async def test_update_to_taken_slug_is_rejected(repository):
    await repository.create(make_post(slug="one"))
    await repository.create(make_post(slug="two"))

    with pytest.raises(DuplicateKeyError):
        await repository.update("one", make_post(slug="two"))

    assert (await repository.get_by_slug("one")) is not None


@pytest.mark.asyncio
async def test_update_missing_slug_raises(repository):
    with pytest.raises(RecordNotFoundError):
        await repository.update("ghost", make_post(slug="ghost"))


@pytest.mark.asyncio
async def test_delete_removes_post(repository):
    await repository.create(make_post())

    await repository.delete("hello")

    assert await repository.get_by_slug("hello") is None


@pytest.mark.asyncio
async def test_delete_missing_slug_raises(repository):
    with pytest.raises(RecordNotFoundError):
        await repository.delete("ghost")


@pytest.mark.asyncio
async def test_listings(repository):
    await repository.create(make_post(slug="a", title="A"))
    await repository.create(make_post(slug="b", title="B", markdown="bee"))

    summaries = await repository.list_summaries()
    posts = await repository.list_all()

    assert summaries == [PostSummary(slug="a", title="A"), PostSummary(slug="b", title="B")]
    assert all(isinstance(p, Post) for p in posts)
    assert {p.markdown for p in posts} == {"# Hi", "bee"}


@pytest.mark.asyncio
async def test_timestamps_come_from_injected_clock(database):
    created = datetime(2024, 1, 2, 3, 4, 5, tzinfo=ZoneInfo("Asia/Aden"))
    updated = datetime(2024, 2, 3, 4, 5, 6, tzinfo=ZoneInfo("Asia/Aden"))
    ticks = iter([created, updated])
    repository = PostRepository(database.get_session, now=lambda: next(ticks))

    await repository.create(make_post())
    await repository.update("hello", make_post(title="Changed"))

    post = await repository.get_by_slug("hello")
    assert post.created_at.replace(tzinfo=None) == created.replace(tzinfo=None)
    assert post.updated_at.replace(tzinfo=None) == updated.replace(tzinfo=None)
