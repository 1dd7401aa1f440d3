"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Record source (file path wins over URL when both are set)
    data_path: str = "weball26.txt"
    data_url: str | None = None
    cycle: int | None = None  # Force cycle number; otherwise derived from coverage dates

    # Record cache
    cache_ttl_seconds: float = 3600.0

    # Service
    service_name: str = "campaign-finance-gateway"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 30.0

    # Contributor classification thresholds (percent of adjusted receipts)
    corporate_influence_threshold: float = 40.0
    grassroots_support_threshold: float = 60.0
    self_funded_threshold: float = 50.0
    party_supported_threshold: float = 20.0

    # Financial health status thresholds
    high_burn_rate_threshold: float = 0.8
    well_funded_cash_threshold: float = 100_000.0
    adequate_cash_threshold: float = 50_000.0

    # Donor ranking entry minimums (dollars)
    high_pac_ranking_minimum: float = 100_000.0
    self_funded_ranking_minimum: float = 100_000.0
    grassroots_ranking_minimum: float = 50_000.0


settings = Settings()
