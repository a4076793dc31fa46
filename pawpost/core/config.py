# pawpost/core/config.py

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from sqlalchemy.engine import URL

REQUIRED_PG_VARS = ["PG_USER", "PG_HOST", "PG_DATABASE", "PG_PASSWORD", "PG_PORT"]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class ConfigError(Exception):
    """Raised when required environment variables are missing or invalid."""

    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(f"Missing required environment variables: {', '.join(missing)}")


@dataclass
class Settings:
    database_url: str
    port: int = 3001
    host: str = "0.0.0.0"
    pg_sslmode: Optional[str] = None
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3001"])
    rate_limit: str = "100/15minutes"
    rate_limit_storage: str = "memory://"
    rate_limit_enabled: bool = True
    static_dir: Path = Path("../frontend/dist")
    bcrypt_rounds: int = 10
    log_level: str = "INFO"


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _database_url(env) -> str:
    url = env.get("DATABASE_URL")
    if url:
        # psycopg v3 driver
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+psycopg://", 1)
        return url

    missing = [name for name in REQUIRED_PG_VARS if not env.get(name)]
    if missing:
        raise ConfigError(missing)

    return URL.create(
        "postgresql+psycopg",
        username=env["PG_USER"],
        password=env["PG_PASSWORD"],
        host=env["PG_HOST"],
        port=int(env["PG_PORT"]),
        database=env["PG_DATABASE"],
    ).render_as_string(hide_password=False)


def load_settings(env=None, dotenv: bool = True) -> Settings:
    """Build Settings from the environment, failing fast on missing database variables."""
    if env is None:
        if dotenv:
            load_dotenv()
        env = os.environ

    origins = env.get("CORS_ORIGINS", "http://localhost:3001")
    return Settings(
        database_url=_database_url(env),
        port=int(env.get("PORT", "3001")),
        host=env.get("HOST", "0.0.0.0"),
        pg_sslmode=env.get("PG_SSLMODE", "prefer"),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        rate_limit=env.get("RATE_LIMIT", "100/15minutes"),
        rate_limit_storage=env.get("RATE_LIMIT_STORAGE", "memory://"),
        rate_limit_enabled=_as_bool(env.get("RATE_LIMIT_ENABLED", "true")),
        static_dir=Path(env.get("STATIC_DIR", "../frontend/dist")),
        bcrypt_rounds=int(env.get("BCRYPT_ROUNDS", "10")),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO"):
    root = logging.getLogger("pawpost")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
