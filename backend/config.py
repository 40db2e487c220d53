"""Configuration settings for the portfolio site."""

from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Paths
    project_root: Path = Path(__file__).parent.parent
    dist_path: Path = Path(__file__).parent.parent / "dist"
    public_path: Path = Path(__file__).parent.parent / "public"
    node_modules_path: Path = Path(__file__).parent.parent / "node_modules"
    templates_path: Path = Path(__file__).parent / "templates"

    # Site
    site_owner: str = "Ben Goldstein"
    site_title: str = "Ben Goldstein"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
