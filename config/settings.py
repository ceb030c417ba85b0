"""
Configuration & Settings
Fibonacci API
"""

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    # App
    APP_NAME: str = "Fibonacci API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Computation
    # Inputs above MAX_INDEX are clamped, missing or malformed inputs fall
    # back to DEFAULT_INDEX.
    DEFAULT_INDEX: int = Field(10, ge=0)
    MAX_INDEX: int = Field(100, ge=0)
    EXTRACTION_METHOD: str = "path_analysis"

    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000


settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency injector."""
    return settings
