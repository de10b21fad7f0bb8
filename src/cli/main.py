"""Magman content CLI main entry point.

This module provides the main CLI application using Typer.
"""
import logging
from pathlib import Path
from typing import Optional

import typer

from ..lib.config_loader import ConfigLoader
from ..models.config import DEFAULT_CONFIG, VALID_LOG_LEVELS, ConfigKey
from .config_command import config
from .duplicates_command import duplicates
from .options import global_config
from .show_command import show

# Create main app
app = typer.Typer(
    name="magman-content",
    help="Magman 文章內容工具，檢視文章文件並比對重複文章",
    no_args_is_help=True,
)

# Add subcommands
app.add_typer(config, name="config", help="配置管理")
app.command()(show)
app.command()(duplicates)


# Global options
@app.callback()
def main(
    config_file: Optional[Path] = typer.Option(None, "--config-file", help="配置檔案路徑"),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="日誌級別 [DEBUG|INFO|WARNING|ERROR]，預設取自配置"
    ),
):
    """Magman Content - 文章內容工具."""
    if log_level is not None and log_level.upper() not in VALID_LOG_LEVELS:
        raise typer.BadParameter(f"無效的日誌級別: {log_level}", param_hint="--log-level")

    logging_config = _load_logging_config(config_file)
    level = (log_level or logging_config[ConfigKey.LOGGING_LEVEL]).upper()

    logging.basicConfig(format=logging_config[ConfigKey.LOGGING_FORMAT])
    # basicConfig leaves the level alone once handlers exist
    logging.getLogger().setLevel(getattr(logging, level))

    global_config["config_file"] = config_file
    global_config["log_level"] = level


def _load_logging_config(config_file: Optional[Path]) -> dict:
    """Read the logging settings, falling back to defaults on invalid config."""
    try:
        config = ConfigLoader().load_config(config_file=config_file)
    except ValueError:
        # The command itself reports the config error
        return DEFAULT_CONFIG
    return config


if __name__ == "__main__":
    app()
