import os
from typing import Optional


class EnvManager:
    """Read configuration values from the process environment."""

    @staticmethod
    def get_env_variable(name: str, default: Optional[str] = None) -> str:
        value = os.getenv(name)
        if value is None or value == "":
            return default  # type: ignore
        return value

    @staticmethod
    def get_bool(name: str, default: bool = False) -> bool:
        value = os.getenv(name)
        if value is None:
            return default
        return value.strip().lower() in ("1", "true", "yes", "on")
