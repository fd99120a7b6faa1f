"""Central configuration using Pydantic BaseSettings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    # Application
    app_name: str = "Hearth Home Agent"
    debug: bool = Field(default=False, alias="HEARTH_DEBUG")
    api_host: str = Field(default="0.0.0.0", alias="HEARTH_API_HOST")
    api_port: int = Field(default=8000, alias="HEARTH_API_PORT")

    # Household defaults
    household_config_path: str = Field(
        default=str(Path(__file__).parent / "household.yaml"),
        alias="HEARTH_HOUSEHOLD_CONFIG",
    )

    # Number of processed commands kept for /agent/history
    history_limit: int = 50

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }


settings = Settings()
