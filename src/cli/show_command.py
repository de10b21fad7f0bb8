"""Show command implementation."""
import logging
from pathlib import Path
from typing import Optional

import typer

from ..lib.console import echo_with_prefix, safe_echo
from ..models.config import VALID_FORMATS, ConfigKey
from ..services.article_service import ArticleService
from .options import load_cli_config

logger = logging.getLogger(__name__)


def show(
    file: Path = typer.Argument(..., help="Article JSON document"),
    format: Optional[str] = typer.Option(None, "--format", help="Output format [table|json]"),
    max_content: Optional[int] = typer.Option(
        None, "--max-content", min=10, max=10000, help="Maximum content preview length"
    ),
):
    """Show articles from a JSON document."""
    echo_with_prefix("SHOW", "show_start")

    try:
        config = load_cli_config()
        output_format = format or config[ConfigKey.DISPLAY_FORMAT]
        if output_format not in VALID_FORMATS:
            raise ValueError(f"Unsupported output format: {output_format}")
        service = ArticleService(
            max_content_length=max_content or config[ConfigKey.DISPLAY_MAX_CONTENT_LENGTH]
        )
        articles = service.load_articles(file)
    except (OSError, ValueError) as e:
        safe_echo(f"[ERROR] Failed to load articles: {e!s}")
        logger.error(f"Show command failed: {e}")
        raise typer.Exit(1)

    if output_format == "json":
        safe_echo(service.export_articles(articles))
        return

    _display_table(service, articles)


def _display_table(service: ArticleService, articles: list) -> None:
    """Display articles as a table."""
    safe_echo(f"\nArticles ({len(articles)}):")
    safe_echo("=" * 50)

    for article in articles:
        row = service.render_article(article)
        article_id = row["id"] if row["id"] is not None else "-"
        safe_echo(f"#{article_id} {row['title']} ({row['author']}) [{row['comment_count']} comments]")
        if row["content"]:
            safe_echo(f"    {row['content']}")

    safe_echo("=" * 50)
