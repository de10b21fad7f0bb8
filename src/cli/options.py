"""Global CLI options shared by all commands."""
import logging
from typing import Any

from ..lib.config_loader import ConfigLoader

logger = logging.getLogger(__name__)

# Global context storage, filled by the main callback
global_config: dict[str, Any] = {
    "config_file": None,
    "log_level": "INFO",
}


def load_cli_config() -> dict[str, Any]:
    """Load configuration using the global --config-file option."""
    loader = ConfigLoader()
    return loader.load_config(config_file=global_config["config_file"])
