from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    build_id: str = ""

    rage_url: str = "http://localhost:8080/rage/upload"
    rage_timeout_seconds: int = 30

    build_report_url: str = "http://localhost:8080/build/report"
    build_report_timeout_seconds: int = 15

    tool_commit: str = ""
    tool_dirty: bool = False
