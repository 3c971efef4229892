# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_DEV_MODE = os.getenv("LISTING_DEV_MODE", "false").lower() in ("true", "1", "yes")
_DB_PATH = os.getenv("LISTING_DB_PATH", None)
_LOG_LEVEL = os.getenv("LISTING_LOG_LEVEL", "INFO").upper()

# Auto-advance timings (milliseconds)
_SELECT_DELAY_MS = int(os.getenv("LISTING_SELECT_DELAY_MS", "200"))
_CHOICE_DELAY_MS = int(os.getenv("LISTING_CHOICE_DELAY_MS", "300"))
_ADDRESS_DELAY_MS = int(os.getenv("LISTING_ADDRESS_DELAY_MS", "500"))
_COMPLETION_DELAY_MS = int(os.getenv("LISTING_COMPLETION_DELAY_MS", "500"))

_PROJECT_ROOT = Path(__file__).parent.parent
_DATA_DIR = _PROJECT_ROOT / "data"


@dataclass
class Config:
    """Application configuration."""

    # Development Mode
    # In dev mode catalog misconfiguration raises instead of degrading
    DEV_MODE: bool = _DEV_MODE

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT
    DATA_DIR: Path = _DATA_DIR
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Database Configuration (SQLite draft store)
    DB_NAME: str = "listing_drafts.db"
    DB_PATH: Path = Path(_DB_PATH) if _DB_PATH else _DATA_DIR / DB_NAME

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_LEVEL: str = _LOG_LEVEL
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # Wizard timings
    SELECT_ADVANCE_DELAY_MS: int = _SELECT_DELAY_MS
    CHOICE_ADVANCE_DELAY_MS: int = _CHOICE_DELAY_MS
    ADDRESS_ADVANCE_DELAY_MS: int = _ADDRESS_DELAY_MS
    COMPLETION_DELAY_MS: int = _COMPLETION_DELAY_MS

    # Drafts
    DRAFT_ID_PREFIX: str = "listing"
    DRAFT_REFERENCE_PREFIX: str = "LST"
    DRAFT_PAGE_SIZE: int = 50

    # Date/Time Formats
    DATETIME_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    LAST_UPDATED_FORMAT: str = "%b %d, %I:%M %p"
