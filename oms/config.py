import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")


def _get_list(name: str, fallback: str = "") -> List[str]:
    raw_value = os.getenv(name, fallback)
    if not raw_value:
        return []
    return [item.strip() for item in raw_value.split(",") if item.strip()]


def _get_bool(name: str, fallback: str = "false") -> bool:
    return os.getenv(name, fallback).strip().lower() in ("1", "true", "yes")


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    _database = os.getenv("POSTGRES_DB")
    _user = os.getenv("POSTGRES_USER")
    _password = os.getenv("POSTGRES_PASSWORD")
    _host = os.getenv("POSTGRES_HOST")
    _port = os.getenv("POSTGRES_PORT")
    return f"postgresql://{_user}:{_password}@{_host}:{_port}/{_database}"


@dataclass(frozen=True)
class Settings:
    database_url: str = field(default_factory=_database_url)
    # three hours
    order_update_cooldown_seconds: int = field(
        default_factory=lambda: int(os.getenv("ORDER_UPDATE_COOLDOWN_SECONDS", "10800"))
    )
    max_page_size: int = field(
        default_factory=lambda: int(os.getenv("MAX_PAGE_SIZE", "100"))
    )
    platform_user_tokens: List[str] = field(
        default_factory=lambda: _get_list("PLATFORM_USER_TOKENS")
    )
    allowed_origins: List[str] = field(
        default_factory=lambda: _get_list("ALLOWED_ORIGINS", "*")
    )
    gzip_minimum_size: int = field(
        default_factory=lambda: int(os.getenv("GZIP_MINIMUM_SIZE", "1000"))
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_dir: Optional[str] = field(default_factory=lambda: os.getenv("LOG_DIR"))
    create_tables: bool = field(default_factory=lambda: _get_bool("CREATE_TABLES"))


settings = Settings()
