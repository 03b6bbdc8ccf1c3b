"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FREERIDER_",
        extra="ignore",
    )

    # Service
    service_name: str = "freerider-bank"
    log_level: str = "INFO"

    # Simulated latency (seconds)
    transfer_delay_seconds: float = 0.5
    lookup_delay_seconds: float = 0.3
    provider_delay_seconds: float = 1.0

    # Virtual accounts
    virtual_account_ttl_minutes: int = 30
    virtual_account_sweep_seconds: float = 60.0
    virtual_account_bank_code: str = "KB"
    virtual_account_bank_name: str = "KB국민은행"
    virtual_account_depositor: str = "FREERIDER_USER"

    # History
    history_default_limit: int = 20

    # PIN hashing
    pin_hash_salt: str = "freerider-mock-ledger"
    pin_hash_iterations: int = 100_000


settings = Settings()
