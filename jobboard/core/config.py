from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List

log = logging.getLogger("jobboard.config")

_DEV_SECRET_KEY = "jobboard-insecure-dev-secret-key-change-me"


class ConfigError(Exception):
    pass


def _env(name: str, default: str = "") -> str:
    return (os.getenv(name) or default).strip()


@dataclass(frozen=True)
class Settings:
    secret_key: str
    env: str = "dev"
    database_path: str = "jobboard.sqlite3"
    bcrypt_work_factor: int = 12
    token_ttl_seconds: int = 0
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3001

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from JOBBOARD_* environment variables.

        In prod a real JOBBOARD_SECRET_KEY is mandatory; elsewhere a
        well-known dev key is used and a warning is logged.
        """
        env = _env("JOBBOARD_ENV", "dev").lower()

        secret = _env("JOBBOARD_SECRET_KEY")
        if not secret:
            if env == "prod":
                raise ConfigError("Missing JOBBOARD_SECRET_KEY (required when JOBBOARD_ENV=prod)")
            log.warning("JOBBOARD_SECRET_KEY not set; using insecure dev secret key")
            secret = _DEV_SECRET_KEY

        default_db = "jobboard_test.sqlite3" if env == "test" else "jobboard.sqlite3"
        default_rounds = "4" if env == "test" else "12"

        try:
            rounds = int(_env("JOBBOARD_BCRYPT_WORK_FACTOR", default_rounds))
            ttl = int(_env("JOBBOARD_TOKEN_TTL_SECONDS", "0"))
            port = int(_env("JOBBOARD_PORT", "3001"))
        except ValueError as e:
            raise ConfigError(f"Invalid numeric setting: {e}") from e

        # bcrypt accepts 4..31 rounds
        if not 4 <= rounds <= 31:
            raise ConfigError(f"JOBBOARD_BCRYPT_WORK_FACTOR must be 4..31, got {rounds}")

        origins_raw = _env("JOBBOARD_CORS_ORIGINS")
        origins = [o.strip() for o in origins_raw.split(",") if o.strip()] if origins_raw else ["*"]

        return cls(
            secret_key=secret,
            env=env,
            database_path=_env("JOBBOARD_DATABASE_PATH", default_db),
            bcrypt_work_factor=rounds,
            token_ttl_seconds=max(0, ttl),
            cors_origins=origins,
            log_level=_env("JOBBOARD_LOG_LEVEL", "INFO").upper(),
            host=_env("JOBBOARD_HOST", "0.0.0.0"),
            port=port,
        )
