import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from src.core.config import Settings
from src.core.database import Database
from src.apps.blog.repositories.post_repository import PostRepository
from src.main import create_app

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "s3cret"


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'blog.db'}"


@pytest_asyncio.fixture
async def database(database_url):
    db = Database(database_url)
    await db.create_all()
    yield db
    await db.disconnect()


@pytest.fixture
def repository(database):
    return PostRepository(database.get_session)


@pytest.fixture
def settings(database_url):
    return Settings(
        ASYNC_DATABASE_URL=database_url,
        SECRET_KEY="test-secret",
        ADMIN_EMAIL=ADMIN_EMAIL,
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    response = client.post(
        "/login",
        data={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
        follow_redirects=False,
    )
    assert response.status_code == 303
    return client
