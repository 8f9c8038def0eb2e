from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "docbrief"
    db_username: str = "docbrief"
    db_password: str = "secret"

    storage_root: Path = Path("/app/files")
    storage_public_base_url: str = "http://localhost:8000/files"

    pdf_engine: str = "stream_scan"
    ocr_language: str = "eng"

    summarization_provider: str = "huggingface"
    summarization_api_key: str = ""
    summarization_base_url: str = ""
    summarization_model: str = ""
    summarization_timeout_seconds: int = 30

    max_upload_size_bytes: int = 50 * 1024 * 1024
    max_concurrent_uploads: int = 4
