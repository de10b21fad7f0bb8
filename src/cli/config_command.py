"""Config command implementation."""
import logging
from typing import Optional

import typer

from ..lib.config_loader import ConfigLoader
from ..lib.console import echo_with_prefix, safe_echo
from .options import global_config

logger = logging.getLogger(__name__)

# Create config subapp
config = typer.Typer(help="Configuration management")


@config.command()
def show(key: Optional[str] = typer.Argument(None, help="Specific configuration key")):
    """Show configuration."""
    echo_with_prefix("CONFIG", "config_show")

    loader = ConfigLoader()
    try:
        config_data = loader.load_config(config_file=global_config["config_file"])
    except ValueError as e:
        safe_echo(f"[ERROR] Failed to show configuration: {e!s}")
        logger.error(f"Config show command failed: {e}")
        raise typer.Exit(1)

    if key:
        if key in config_data:
            safe_echo(f"{key} = {config_data[key]}")
        else:
            safe_echo(f"[WARNING] Configuration key '{key}' not found")
            safe_echo("Available keys:")
            for k in sorted(config_data.keys()):
                safe_echo(f"  - {k}")
            raise typer.Exit(1)
        return

    safe_echo("\nCurrent Configuration:")
    safe_echo("=" * 50)

    # Group configurations by category
    categories: dict[str, list] = {}
    for k, v in config_data.items():
        category = k.split(".")[0] if "." in k else "general"
        categories.setdefault(category, []).append((k, v))

    for category, items in sorted(categories.items()):
        safe_echo(f"\n[{category.upper()}]")
        for k, v in sorted(items):
            safe_echo(f"  {k} = {v}    ({loader.config_to_env_key(k)})")

    safe_echo(f"\nSources: {', '.join(loader.get_config_sources())}")
    safe_echo("=" * 50)
