# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate configuration from environment
#   variables / .env file. Provides typed config objects
#   to the store, persistence and CLI modules.
#
# CLASSES:
# --------
# - StoreConfig (dataclass)
#     max_items: int     (default 100)
#     name_width: int    (default 49)
#
# - AppConfig (dataclass)
#     store: StoreConfig
#     data_file: str     (default "items.csv")
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# USAGE:
# ------
#   from rabbit.config import get_config
#   config = get_config()
#   print(config.data_file)
#   print(config.store.max_items)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


DEFAULT_DATA_FILE = "items.csv"
DEFAULT_MAX_ITEMS = 100
DEFAULT_NAME_WIDTH = 49


@dataclass
class StoreConfig:
    """Bounds applied to the in-memory item store."""
    max_items: int = DEFAULT_MAX_ITEMS
    name_width: int = DEFAULT_NAME_WIDTH


@dataclass
class AppConfig:
    """Main application configuration."""
    store: StoreConfig = field(default_factory=StoreConfig)
    data_file: str = DEFAULT_DATA_FILE


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _positive_int(var_name: str, default: int) -> int:
    value = int(os.getenv(var_name, str(default)))
    if value <= 0:
        raise ValueError(f"{var_name} must be a positive integer, got {value}")
    return value


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    store_config = StoreConfig(
        max_items=_positive_int("RABBIT_MAX_ITEMS", DEFAULT_MAX_ITEMS),
        name_width=_positive_int("RABBIT_NAME_WIDTH", DEFAULT_NAME_WIDTH)
    )

    _config_instance = AppConfig(
        store=store_config,
        data_file=os.getenv("RABBIT_DATA_FILE", DEFAULT_DATA_FILE)
    )

    return _config_instance
