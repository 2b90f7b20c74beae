from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    app_name: str = "boredapi-client"
    app_env: str = "dev"

    bored_api_url: str = "http://www.boredapi.com/api/activity"
    http_timeout_seconds: float = 30.0
    user_agent: str = "boredapi-client/0.1"

    # Reject out-of-range criteria before a request is sent.
    validate_criteria: bool = True

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
    )

    @property
    def log_level_resolved(self) -> str:
        level = (self.log_level or "").strip().upper()
        return level or "INFO"


settings = Settings()
