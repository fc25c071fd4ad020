"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "budget-gateway"
    log_level: str = "INFO"

    # Projection
    projection_window_months: int = 6
    catch_up_max_months: int = 1200  # ~100 years

    # Trends
    trend_window_months: int = 6

    # Installments
    default_installment_count: int = 3


settings = Settings()
