"""Unit tests for service layer.

Test article document loading, duplicate detection and display helpers.
"""
import json
from pathlib import Path

import pytest

from src.models.article import Article
from src.models.comment import Comment
from src.services.article_service import ArticleService


class TestArticleService:
    """Test ArticleService functionality."""

    @pytest.fixture
    def article_service(self) -> ArticleService:
        """Create article service instance."""
        return ArticleService(max_content_length=20)

    @pytest.fixture
    def sample_document(self, tmp_path: Path) -> Path:
        """Sample article document with a duplicate pair."""
        data = {
            "articles": [
                {
                    "id": 1,
                    "title": "T",
                    "content": "Body",
                    "author": "Alice",
                    "comments": [{"id": 7, "author": "bob", "content": "Nice"}],
                },
                {"id": 2, "title": "Other", "content": "Text", "author": "Bob"},
                {
                    "id": 3,
                    "title": "T",
                    "content": "Body",
                    "author": "Alice",
                    "comments": [{"id": 8, "author": "bob", "content": "Nice"}],
                },
            ]
        }
        path = tmp_path / "articles.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    def test_load_articles(self, article_service: ArticleService, sample_document: Path):
        """Test loading articles from an object document."""
        articles = article_service.load_articles(sample_document)

        assert len(articles) == 3
        assert articles[0].id == 1
        assert articles[0].comments == [Comment("bob", "Nice")]
        assert articles[1].comments == []

    def test_load_articles_from_list(self, article_service: ArticleService, tmp_path: Path):
        """Test loading a top-level list of articles."""
        path = tmp_path / "list.json"
        path.write_text(json.dumps([{"title": "文章標題", "author": "作者"}]), encoding="utf-8")

        articles = article_service.load_articles(path)

        assert articles == [Article("文章標題", None, "作者")]

    def test_load_missing_file(self, article_service: ArticleService, tmp_path: Path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            article_service.load_articles(tmp_path / "missing.json")

    def test_load_invalid_json(self, article_service: ArticleService, tmp_path: Path):
        """Test that broken JSON raises ValueError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="JSON"):
            article_service.load_articles(path)

    @pytest.mark.parametrize(
        "payload",
        [
            {"items": []},
            "text",
            [1, 2],
            [{"title": "T", "comments": "bad"}],
            [{"title": ["T"]}, {"title": ["T"]}],
            [{"title": "T", "content": 5}],
            [{"id": "7", "title": "T"}],
        ],
    )
    def test_load_wrong_shape(self, article_service: ArticleService, tmp_path: Path, payload):
        """Test that documents of the wrong shape are rejected."""
        path = tmp_path / "wrong.json"
        path.write_text(json.dumps(payload), encoding="utf-8")

        with pytest.raises(ValueError):
            article_service.load_articles(path)

    def test_load_non_utf8_file(self, article_service: ArticleService, tmp_path: Path):
        """Test that an undecodable file names the file in the error."""
        path = tmp_path / "latin1.json"
        path.write_bytes("[{\"title\": \"caf\u00e9\"}]".encode("latin-1"))

        with pytest.raises(ValueError, match="latin1.json"):
            article_service.load_articles(path)

    def test_find_duplicates(self, article_service: ArticleService, sample_document: Path):
        """Test grouping articles that differ only by id."""
        articles = article_service.load_articles(sample_document)

        groups = article_service.find_duplicates(articles)

        assert len(groups) == 1
        assert [article.id for article in groups[0]] == [1, 3]

    def test_find_duplicates_none(self, article_service: ArticleService):
        """Test that distinct articles produce no groups."""
        articles = [Article("A", "x", "u"), Article("B", "x", "u")]

        assert article_service.find_duplicates(articles) == []

    def test_find_duplicates_keeps_first_seen_order(self, article_service: ArticleService):
        """Test group ordering follows the input order."""
        articles = [
            Article("B", "x", "u", id=1),
            Article("A", "x", "u", id=2),
            Article("A", "x", "u", id=3),
            Article("B", "x", "u", id=4),
        ]

        groups = article_service.find_duplicates(articles)

        assert [[a.id for a in group] for group in groups] == [[1, 4], [2, 3]]

    def test_content_preview(self, article_service: ArticleService):
        """Test content preview truncation."""
        article = Article("T", "一段很長的文章內容。" * 10, "Alice")

        preview = article_service.get_content_preview(article)

        assert len(preview) <= 23  # 20 + "..."
        assert preview.endswith("...")

        article.content = "short\n\nbody"
        assert article_service.get_content_preview(article) == "short body"

        article.content = None
        assert article_service.get_content_preview(article) == ""

    def test_render_article(self, article_service: ArticleService):
        """Test building the display summary."""
        article = Article("T", "Body", "Alice", [Comment("bob", "hi")], id=5)

        row = article_service.render_article(article)

        assert row == {
            "id": 5,
            "title": "T",
            "author": "Alice",
            "content": "Body",
            "comment_count": 1,
        }

    def test_export_articles(self, article_service: ArticleService):
        """Test exporting articles to JSON."""
        articles = [Article("標題", "Body", "Alice", id=1)]

        exported = article_service.export_articles(articles)

        assert "標題" in exported
        assert json.loads(exported) == {
            "articles": [
                {"id": 1, "title": "標題", "content": "Body", "author": "Alice", "comments": []}
            ]
        }
