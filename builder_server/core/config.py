# builder_server/core/config.py

import os
from dataclasses import dataclass, field
from functools import lru_cache
from dotenv import load_dotenv


load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str) -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class Settings:
    """
    Runtime settings, read from the environment (and a local .env file).
    """
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///./data/app.db"))
    bcrypt_rounds: int = field(default_factory=lambda: int(os.getenv("BCRYPT_ROUNDS", "10")))
    history_limit: int = field(default_factory=lambda: int(os.getenv("HISTORY_LIMIT", "10")))
    cors_origins: list[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3001")))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    expose_internal_errors: bool = field(default_factory=lambda: _env_bool("EXPOSE_INTERNAL_ERRORS"))


@lru_cache
def get_settings() -> Settings:
    return Settings()
