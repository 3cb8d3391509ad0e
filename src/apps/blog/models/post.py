"""Post model."""

from sqlmodel import Field
from src.core.database import BaseModel


class Post(BaseModel, table=True):
    """Post model class."""
    
    __tablename__ = "blog_posts"  # type: ignore
    slug: str = Field(unique=True, index=True, nullable=False)
    title: str = Field(nullable=False)
    markdown: str = Field(nullable=False)

