"""Duplicates command implementation."""
import json
import logging
from pathlib import Path
from typing import Optional

import typer

from ..lib.console import echo_with_prefix, safe_echo
from ..models.config import VALID_FORMATS, ConfigKey
from ..services.article_service import ArticleService
from .options import load_cli_config

logger = logging.getLogger(__name__)


def duplicates(
    file: Path = typer.Argument(..., help="Article JSON document"),
    format: Optional[str] = typer.Option(None, "--format", help="Output format [table|json]"),
):
    """Find articles that are equal apart from their identifiers."""
    echo_with_prefix("DUPLICATES", "duplicates_start")

    try:
        config = load_cli_config()
        output_format = format or config[ConfigKey.DISPLAY_FORMAT]
        if output_format not in VALID_FORMATS:
            raise ValueError(f"Unsupported output format: {output_format}")
        service = ArticleService(max_content_length=config[ConfigKey.DISPLAY_MAX_CONTENT_LENGTH])
        articles = service.load_articles(file)
    except (OSError, ValueError) as e:
        safe_echo(f"[ERROR] Failed to load articles: {e!s}")
        logger.error(f"Duplicates command failed: {e}")
        raise typer.Exit(1)

    groups = service.find_duplicates(articles)

    if output_format == "json":
        data = [[article.to_dict() for article in group] for group in groups]
        safe_echo(json.dumps({"duplicates": data}, indent=2, ensure_ascii=False))
        return

    if not groups:
        echo_with_prefix("DUPLICATES", "duplicates_none")
        return

    for index, group in enumerate(groups, 1):
        ids = ", ".join("-" if article.id is None else str(article.id) for article in group)
        safe_echo(f"Group {index}: {group[0].title} ({group[0].author}) ids=[{ids}]")
