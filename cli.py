import asyncio
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from src.core.config import settings
from src.core.database import Database
from src.apps.blog.repositories.post_repository import PostRepository
from src.apps.blog.schemas.post import PostCreate
from src.core.bases.base_repository import RepositoryError

app = typer.Typer(help="Management CLI for the blog.")

DatabaseUrlOption = typer.Option(
    None, "--database-url", "-d", help="Async database URL (defaults to settings)"
)


# ---------------------------
# Helpers
# ---------------------------
def open_database(database_url: Optional[str]) -> Database:
    return Database(
        database_url or settings.ASYNC_DATABASE_URL,
        echo=settings.DATABASE_ECHO,
        clock=settings.get_now,
    )


async def _init_db(database: Database) -> None:
    try:
        await database.create_all()
    finally:
        await database.disconnect()


async def _list_posts(database: Database):
    try:
        await database.create_all()
        return await PostRepository(database.get_session, now=database.now).list_summaries()
    finally:
        await database.disconnect()


async def _create_post(database: Database, post: PostCreate):
    try:
        await database.create_all()
        return await PostRepository(database.get_session, now=database.now).create(post)
    finally:
        await database.disconnect()


# ---------------------------
# Commands
# ---------------------------
@app.command()
def init_db(database_url: Optional[str] = DatabaseUrlOption):
    """Create the database tables."""
    asyncio.run(_init_db(open_database(database_url)))
    print("✅ Database tables created")


@app.command()
def list_posts(database_url: Optional[str] = DatabaseUrlOption):
    """List all posts."""
    summaries = asyncio.run(_list_posts(open_database(database_url)))
    if not summaries:
        print("📁 No posts found.")
        return
    for summary in summaries:
        print(f"{summary.slug}\t{summary.title}")


@app.command()
def create_post(
    slug: str,
    title: str,
    file: Path = typer.Option(..., "--file", "-f", exists=True, dir_okay=False, help="Markdown source file"),
    database_url: Optional[str] = DatabaseUrlOption,
):
    """Create a post from a markdown file."""
    markdown = file.read_text(encoding="utf-8")
    if not slug or not title or not markdown:
        print("❌ Slug, title and markdown must not be empty.")
        raise typer.Exit(1)

    post = PostCreate(slug=slug, title=title, markdown=markdown)
    try:
        asyncio.run(_create_post(open_database(database_url), post))
    except RepositoryError as e:
        print(f"❌ Could not create post: {e}")
        raise typer.Exit(1)
    print(f"✅ Created: {slug}")


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
    reload: bool = typer.Option(False, help="Enable auto-reload in development"),
):
    """Run the web application."""
    uvicorn.run("src.main:app", host=host, port=port, reload=reload, log_level="info")


# ---------------------------
# Entrypoint
# ---------------------------
if __name__ == "__main__":
    app()
