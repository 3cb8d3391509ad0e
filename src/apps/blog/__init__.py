"""Blog app."""

from .routers.admin_router import router as admin_post_router
from .routers.post_router import router as post_router
