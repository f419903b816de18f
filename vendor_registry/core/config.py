from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = Field(default="Vendor Registry", alias="APP_NAME")
    app_env: str = Field(default="development", alias="APP_ENV")
    frontend_url: str = Field(default="http://localhost:3000", alias="FRONTEND_URL")

    # Database (SQLite for local dev, any async SQLAlchemy URL in production)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./vendor_registry.db",
        alias="DATABASE_URL",
    )
    auto_create_schema: bool = Field(
        default=True, alias="AUTO_CREATE_SCHEMA",
    )  # Create the vendors table on startup when missing

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
