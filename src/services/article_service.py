"""Article service implementation.

This module loads article documents and groups value-equal articles.
"""
import json
import logging
from pathlib import Path
from typing import Any

from ..models.article import Article

logger = logging.getLogger(__name__)


class ArticleService:
    """文章服務，負責讀取文章文件與比對重複文章."""

    def __init__(self, max_content_length: int = 80):
        self.max_content_length = max_content_length

    def load_articles(self, path: Path) -> list[Article]:
        """
        從 JSON 文件載入文章.

        Accepts either a top-level list of article objects or an object
        with an ``articles`` list.

        Args:
            path: 文章文件路徑

        Returns:
            list[Article]: 載入的文章
        """
        if not path.exists():
            raise FileNotFoundError(f"文章文件不存在: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"無效的 JSON 文件 ({path}): {e}") from e
        except UnicodeDecodeError as e:
            raise ValueError(f"文件編碼錯誤，需要 UTF-8 ({path}): {e}") from e

        if isinstance(data, dict):
            data = data.get("articles")

        if not isinstance(data, list):
            raise ValueError(f"文章文件格式錯誤 ({path}): 需要文章列表")

        articles = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise ValueError(f"文章文件格式錯誤 ({path}): 第 {index} 筆不是物件")
            try:
                articles.append(Article.from_dict(item))
            except ValueError as e:
                raise ValueError(f"文章文件格式錯誤 ({path}): 第 {index} 筆 {e}") from e

        logger.info(f"從 {path} 載入 {len(articles)} 篇文章")
        return articles

    def find_duplicates(self, articles: list[Article]) -> list[list[Article]]:
        """Group articles that are equal regardless of their identifiers."""
        groups: dict[Article, list[Article]] = {}
        for article in articles:
            groups.setdefault(article, []).append(article)

        duplicates = [group for group in groups.values() if len(group) > 1]
        logger.debug(f"找到 {len(duplicates)} 組重複文章")
        return duplicates

    def get_content_preview(self, article: Article) -> str:
        """Get a single-line content preview."""
        if not article.content:
            return ""

        preview = " ".join(article.content.split())
        if len(preview) <= self.max_content_length:
            return preview

        return preview[: self.max_content_length].rstrip() + "..."

    def render_article(self, article: Article) -> dict[str, Any]:
        """Build the display summary of an article."""
        return {
            "id": article.id,
            "title": article.title,
            "author": article.author,
            "content": self.get_content_preview(article),
            "comment_count": len(article.comments or []),
        }

    def export_articles(self, articles: list[Article]) -> str:
        """Serialize articles to a JSON document."""
        return json.dumps(
            {"articles": [article.to_dict() for article in articles]},
            indent=2,
            ensure_ascii=False,
        )
