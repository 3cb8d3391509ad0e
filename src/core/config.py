from datetime import datetime
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings

from src.core.env_manager import EnvManager


class Settings(BaseSettings):
    ASYNC_DATABASE_URL: str = EnvManager.get_env_variable(
        "ASYNC_DATABASE_URL", "sqlite+aiosqlite:///database.db"
    )
    DATABASE_ECHO: bool = EnvManager.get_bool("DATABASE_ECHO", False)
    SECRET_KEY: str = EnvManager.get_env_variable("SECRET_KEY", "supersecretkey")

    ADMIN_EMAIL: str = EnvManager.get_env_variable("ADMIN_EMAIL", "admin@example.com")
    ADMIN_PASSWORD: str = EnvManager.get_env_variable("ADMIN_PASSWORD", "admin")

    PROJECT_NAME: str = EnvManager.get_env_variable("PROJECT_NAME", "Markdown Blog")
    PROJECT_INFO: str = EnvManager.get_env_variable(
        "PROJECT_INFO", "Markdown blog with a single admin"
    )
    PROJECT_VERSION: str = EnvManager.get_env_variable("PROJECT_VERSION", "1.0.0")
    TIME_ZONE: str = EnvManager.get_env_variable("TIME_ZONE", "UTC")
    LOG_LEVEL: str = EnvManager.get_env_variable("LOG_LEVEL", "INFO")

    def get_now(self):
        """Get the current time in the configured time zone."""
        tz = ZoneInfo(self.TIME_ZONE)
        return datetime.now(tz)


settings = Settings()
