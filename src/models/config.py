"""Config data model.

This module defines default configuration values and their validation rules.
"""
from typing import Any

# Default configuration values
DEFAULT_CONFIG: dict[str, Any] = {
    "display.max_content_length": 80,  # 內容預覽最大長度
    "display.format": "table",  # 輸出格式
    "logging.level": "INFO",  # 日誌級別
    "logging.format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",  # 日誌格式
}


class ConfigKey:
    """Configuration key constants."""

    # Display settings
    DISPLAY_MAX_CONTENT_LENGTH = "display.max_content_length"
    DISPLAY_FORMAT = "display.format"

    # Logging settings
    LOGGING_LEVEL = "logging.level"
    LOGGING_FORMAT = "logging.format"


VALID_FORMATS = {"table", "json"}
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def get_default_value(key: str) -> Any:
    """Get default value for configuration key."""
    return DEFAULT_CONFIG.get(key)


def coerce_config_value(key: str, value: str) -> Any:
    """Convert a raw string config value to the type of its default."""
    default = DEFAULT_CONFIG.get(key)
    if isinstance(default, int):
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"{key} 必須為整數: {value}") from None
    return value


def validate_config_value(key: str, value: Any) -> None:
    """Validate configuration value for specific key."""
    if key == ConfigKey.DISPLAY_MAX_CONTENT_LENGTH:
        if not isinstance(value, int) or value < 10:
            raise ValueError("display.max_content_length 必須為不小於 10 的整數")
        if value > 10000:
            raise ValueError("display.max_content_length 不可超過 10000")

    elif key == ConfigKey.DISPLAY_FORMAT:
        if value not in VALID_FORMATS:
            raise ValueError(f"display.format 必須為以下值之一: {sorted(VALID_FORMATS)}")

    elif key == ConfigKey.LOGGING_LEVEL:
        if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"logging.level 必須為以下值之一: {sorted(VALID_LOG_LEVELS)}")

    elif key == ConfigKey.LOGGING_FORMAT:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("logging.format 不可為空")
