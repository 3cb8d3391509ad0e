"""Every table model, imported so SQLModel.metadata knows about it."""

from src.apps.blog.models.post import Post  # noqa: F401
