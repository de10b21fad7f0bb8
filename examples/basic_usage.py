#!/usr/bin/env python3
"""
Magman content 基本使用範例

此範例展示文章模型的建立、比對與文件讀取。
"""

import logging
import sys
from pathlib import Path

# 添加專案根目錄到 Python 路徑
sys.path.append(str(Path(__file__).parent.parent))

from src.lib.config_loader import ConfigLoader
from src.models.article import Article
from src.models.comment import Comment
from src.services.article_service import ArticleService


def basic_usage_example():
    """基本使用範例"""
    config = ConfigLoader().load_config()
    logging.basicConfig(level=config["logging.level"].upper(), format=config["logging.format"])

    print("Magman content 基本使用範例")
    print("=" * 50)

    # 1. 建立文章
    draft = Article("Hello", "First post", "Alice")
    draft.comments.append(Comment("Bob", "Welcome!"))
    saved = Article.with_id(42, "Hello", "First post", "Alice", [Comment("Bob", "Welcome!", id=7)])

    print(f"\n草稿: {draft}")
    print(f"已儲存 (id={saved.id}): {saved}")
    print(f"相等 (忽略 id): {draft == saved}")

    # 2. 讀取文章文件
    service = ArticleService(max_content_length=config["display.max_content_length"])
    articles = service.load_articles(Path(__file__).parent / "articles.json")

    print(f"\n載入 {len(articles)} 篇文章:")
    for article in articles:
        print(f"  {service.render_article(article)}")

    # 3. 比對重複文章
    for group in service.find_duplicates(articles):
        ids = [article.id for article in group]
        print(f"\n重複文章: {group[0].title} ids={ids}")


if __name__ == "__main__":
    basic_usage_example()
