"""Runtime settings read from the environment."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_SALES_CODE = 4100
DEFAULT_PURCHASES_CODE = 5100
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Application settings.

    Attributes:
        database_path: SQLite file, or None to use ~/.aoiro/aoiro.db
        sales_account_code: Revenue account reported as monthly sales
        purchases_account_code: Expense account reported as purchases
        log_level: Name of the logging level for the CLI
    """

    database_path: Optional[str] = None
    sales_account_code: int = DEFAULT_SALES_CODE
    purchases_account_code: int = DEFAULT_PURCHASES_CODE
    log_level: str = DEFAULT_LOG_LEVEL


def _int_setting(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer account code, got '{raw}'")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from AOIRO_* environment variables.

    Raises:
        ValueError: If an account code is not an integer or the log level is unknown
    """
    if environ is None:
        environ = os.environ

    log_level = (environ.get("AOIRO_LOG_LEVEL") or "").strip().upper() or DEFAULT_LOG_LEVEL
    if log_level not in logging.getLevelNamesMapping():
        raise ValueError(f"AOIRO_LOG_LEVEL must be a logging level name, got '{log_level}'")

    return Settings(
        database_path=environ.get("AOIRO_DB_PATH") or None,
        sales_account_code=_int_setting(environ, "AOIRO_SALES_CODE", DEFAULT_SALES_CODE),
        purchases_account_code=_int_setting(environ, "AOIRO_PURCHASES_CODE", DEFAULT_PURCHASES_CODE),
        log_level=log_level,
    )


def default_database_path() -> str:
    """Return ~/.aoiro/aoiro.db, creating the directory."""
    db_dir = Path.home() / ".aoiro"
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / "aoiro.db")
