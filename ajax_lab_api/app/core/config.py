"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts against a local PostgreSQL instance without any
configuration.  Database credentials, the listening port and the
simulated latencies are all supplied here; nothing else in the
application reads the environment.
"""

import os
from dataclasses import dataclass
from typing import List


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "AJAX Lab API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    # Prefix under which every route is mounted.  The browser client
    # expects ``/api/...`` paths.
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # PostgreSQL connection parameters.
    db_host: str = os.getenv("DB_HOST", "localhost")
    db_port: int = int(os.getenv("DB_PORT", "5432"))
    db_user: str = os.getenv("DB_USER", "postgres")
    db_password: str = os.getenv("DB_PASSWORD", "postgres")
    db_name: str = os.getenv("DB_NAME", "ajax_lab")
    db_connect_timeout: int = int(os.getenv("DB_CONNECT_TIMEOUT", "5"))

    # Maximum number of records returned by the calculation history.
    history_limit: int = int(os.getenv("HISTORY_LIMIT", "20"))

    # Verification demo.  The code is a fixed constant and the delay
    # only simulates network latency; neither is a security control.
    otp_code: str = os.getenv("OTP_CODE", "123456")
    otp_delay_seconds: float = float(os.getenv("OTP_DELAY_SECONDS", "0.5"))

    # Delay applied by the ``/slow`` demo endpoint.
    slow_delay_seconds: float = float(os.getenv("SLOW_DELAY_SECONDS", "5"))

    # Comma‑separated list of origins allowed by CORS.  ``*`` allows all.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    def dsn(self) -> str:
        """Return a libpq keyword/value connection string."""
        return "host={h} port={p} dbname={db} user={u} password={pw} connect_timeout={t}".format(
            h=self.db_host,
            p=self.db_port,
            db=self.db_name,
            u=self.db_user,
            pw=self.db_password,
            t=self.db_connect_timeout,
        )

    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
