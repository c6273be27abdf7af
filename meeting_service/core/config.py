# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Centralised settings, read from env vars once."""
import os


class Settings:
    SERVICE_NAME: str = "meeting-service"
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./meetings.db")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
    MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "5"))
    POOL_RECYCLE: int = int(os.getenv("DB_POOL_RECYCLE", "300"))

    # Seeding
    SEED_ON_STARTUP: bool = os.getenv("SEED_ON_STARTUP", "true").lower() == "true"
    SEED_DEFAULT_PASSWORD: str = os.getenv("SEED_DEFAULT_PASSWORD", "1234")

    # Dispatch
    NOTIFY_WINDOW_DAYS: int = int(os.getenv("NOTIFY_WINDOW_DAYS", "1"))

    # Email (mock transport when SMTP_HOST is empty)
    SMTP_HOST: str = os.getenv("SMTP_HOST", "")
    SMTP_PORT: int = int(os.getenv("SMTP_PORT", "587"))
    SMTP_USERNAME: str = os.getenv("SMTP_USERNAME", "")
    SMTP_PASSWORD: str = os.getenv("SMTP_PASSWORD", "")
    SMTP_SENDER: str = os.getenv("SMTP_SENDER", "no-reply@meetings.local")
    SMTP_USE_TLS: bool = os.getenv("SMTP_USE_TLS", "true").lower() == "true"
    SMTP_TIMEOUT: float = float(os.getenv("SMTP_TIMEOUT", "30"))


settings = Settings()
