import os
import logging
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

USAGE = "usage: cafe <dbname> <port> <user>"

BACKENDS = ("postgres", "sqlite")

class ConfigError(Exception):
    """bad startup arguments or environment"""

@dataclass
class Settings:
    """connection settings from argv + environment (.env is loaded on import)"""
    dbname: str
    port: str
    user: str
    backend: str = "postgres"
    host: str = "localhost"
    # the database password was always empty for this app; override via env if needed
    password: str = ""
    log_level: str = "WARNING"

    @classmethod
    def from_args(cls, args: list[str]) -> "Settings":
        if len(args) != 3:
            raise ConfigError(USAGE)
        dbname, port, user = args
        backend = os.getenv("CAFE_DB_BACKEND", "postgres").strip().lower()
        if backend not in BACKENDS:
            raise ConfigError(f"unknown CAFE_DB_BACKEND '{backend}' (expected one of: {', '.join(BACKENDS)})")
        return cls(
            dbname=dbname,
            port=port,
            user=user,
            backend=backend,
            host=os.getenv("CAFE_DB_HOST", "localhost"),
            password=os.getenv("CAFE_DB_PASSWORD", ""),
            log_level=os.getenv("CAFE_LOG_LEVEL", "WARNING").upper(),
        )

def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
