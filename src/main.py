import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware
import uvicorn

from src.core.config import Settings, settings as default_settings
from src.core.database import Database
from src.core.exceptions import ServiceException
from src.core.response.handlers import global_exception_handler, service_exception_handler

# Import routers from apps
from src.apps.auth import auth_router
from src.apps.blog import admin_post_router, post_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(settings.LOG_LEVEL.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: open the database and make sure the tables exist
        database = Database(
            settings.ASYNC_DATABASE_URL,
            echo=settings.DATABASE_ECHO,
            clock=settings.get_now,
        )
        await database.create_all()
        await database.connect()
        app.state.database = database
        yield
        # Shutdown: release pooled connections
        logger.info("Shutting down...")
        await database.disconnect()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_INFO,
        version=settings.PROJECT_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Adjust in production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SessionMiddleware, secret_key=settings.SECRET_KEY)

    app.add_exception_handler(ServiceException, service_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint with health check."""
        return {"message": "Server is running!", "status": "healthy", "version": settings.PROJECT_VERSION}

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "message": "Service is running normally"}

    # Admin routes first: /posts/admin must not be taken as a post slug
    app.include_router(auth_router)
    app.include_router(admin_post_router)
    app.include_router(post_router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload in development
        log_level="info",
    )
