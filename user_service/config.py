"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_path: str = "./data/user_service.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Accounts are keyed by phone numbers in this country prefix
    phone_prefix: str = "+62"

    # JWT Configuration
    jwt_secret_key: str = "change-me-in-production-use-env-var"
    jwt_expiry_hours: int = 72

    # Scrypt work factor (n must be a power of two)
    # Tests lower scrypt_n for faster execution
    scrypt_n: int = 32768
    scrypt_r: int = 8
    scrypt_p: int = 1
    scrypt_dklen: int = 32

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()
