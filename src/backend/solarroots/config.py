"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_VISION_PATH = Path(__file__).parent / "data" / "vision.yaml"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="SOLARROOTS_"
    )

    # Application
    app_name: str = "SolarRoots Directory"
    app_version: str = "0.1.0"
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./solarroots.db"
    seed_demo_data: bool = True

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Vision document (YAML)
    vision_config_path: Path = DEFAULT_VISION_PATH


settings = Settings()
