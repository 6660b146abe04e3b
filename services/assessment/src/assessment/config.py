import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_env_file() -> str | None:
    """Find .env file, preferring .env.local for local development."""
    for env_file in [".env.local", ".env"]:
        for base in [".", os.environ.get("REPO_ROOT", "")]:
            if base:
                path = Path(base) / env_file
                if path.exists():
                    return str(path)
    return None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_find_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Collaborators
    patient_api_url: str = "http://localhost:8081"
    notes_api_url: str = "http://localhost:8082"

    # HTTP
    http_timeout_seconds: float = 5.0


settings = Settings()
