"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LOAN_ENGINE_",
        extra="ignore",
    )

    # Service
    service_name: str = "loan-engine"
    log_level: str = "INFO"

    # Presentation
    currency_symbol: str = "₹"
    export_filename_fallback: str = "applicant"


settings = Settings()
