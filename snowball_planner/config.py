"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "snowball-planner"
    log_level: str = "INFO"

    # Engine
    max_months: int = 600  # Simulation cap, 50 years

    # Import limits
    max_import_bytes: int = 1_000_000
    max_debts: int = 500


settings = Settings()
