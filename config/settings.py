"""
Application settings loaded from environment variables.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ── Database ─────────────────────────────────────────────────────────
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "product"
    database_url: Optional[str] = None   # overrides the assembled URL when set

    db_connect_timeout: float = 10
    db_command_timeout: float = 30
    db_pool_timeout: float = 30

    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str = ""                 # empty → random per-process secret
    jwt_expiry_seconds: int = 86400      # 24 hours
    bcrypt_rounds: int = 14

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 8000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    @property
    def sqlalchemy_url(self) -> str:
        """Async SQLAlchemy URL for the relational store."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )


config = Settings()
