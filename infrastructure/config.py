from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # make it absolute so reload/CWD doesn't break it
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="BlogList", validation_alias="APP_NAME")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        validation_alias="APP_ENV",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: Path = Field(
        default=Path(__file__).resolve().parents[1] / "logs",
        validation_alias="LOG_DIR",
    )

    # API
    api_host: str = Field(default="127.0.0.1", validation_alias="API_HOST")
    api_port: int = Field(default=3003, validation_alias="API_PORT")

    # Store
    store_backend: Literal["memory", "mongo"] = Field(
        default="mongo",
        validation_alias="STORE_BACKEND",
    )

    # MongoDB
    mongo_uri: str = Field(
        default="mongodb://localhost:27017",
        validation_alias="MONGO_URI",
    )
    mongo_db: str = Field(default="bloglist", validation_alias="MONGO_DB")
    mongo_blogs_collection: str = Field(
        default="blogs",
        validation_alias="MONGO_BLOGS_COLLECTION",
    )
    mongo_timeout_ms: int = Field(default=5000, validation_alias="MONGO_TIMEOUT_MS")


# Global settings instance
settings = Settings()
