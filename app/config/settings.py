import tempfile
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000

    fetch_timeout_seconds: float = 30.0
    fetch_max_bytes: int = 50 * 1024 * 1024

    rasterizer_engine: str = "pymupdf"
    rasterizer_dpi: int = 150
    rasterizer_max_pages: int = 50
    rasterizer_timeout_seconds: int = 60
    artifacts_dir: Path = Field(
        default_factory=lambda: Path(tempfile.gettempdir()) / "docscan"
    )

    extraction_provider: str = "openai"

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o"
    openai_timeout_seconds: int = 60
    openai_max_retries: int = 0
    openai_max_completion_tokens: int = 16384

    openai_compatible_base_url: str = ""
    openai_compatible_api_key: str = ""
