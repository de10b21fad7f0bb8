"""Article data model.

This module defines the Article data class and its dictionary mapping.
"""
from dataclasses import dataclass, field
from typing import Any, Optional

from .comment import Comment
from .mapping import read_optional_int, read_optional_str


@dataclass
class Article:
    """文章資料模型.

    Equality and hashing only look at title, content, author and comments.
    ``id`` is left out so an unsaved article equals its persisted copy.

    A comments list passed in is kept as-is, not copied; the article owns it
    from then on.
    """

    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    comments: list[Comment] = field(default_factory=list)
    id: Optional[int] = field(default=None, compare=False, repr=False)

    @classmethod
    def with_id(
        cls,
        id: Optional[int],
        title: Optional[str],
        content: Optional[str],
        author: Optional[str],
        comments: list[Comment],
    ) -> "Article":
        """Create a fully specified article, identifier first."""
        return cls(title=title, content=content, author=author, comments=comments, id=id)

    def __hash__(self) -> int:
        comments = tuple(self.comments) if self.comments is not None else None
        return hash((self.title, self.content, self.author, comments))

    def to_dict(self) -> dict:
        """Convert article to dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "author": self.author,
            "comments": [comment.to_dict() for comment in self.comments or []],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Article":
        """Create article from dictionary."""
        raw_comments = data.get("comments")
        if raw_comments is None:
            raw_comments = []
        if not isinstance(raw_comments, list):
            raise ValueError(f"comments 必須為列表: {type(raw_comments).__name__}")

        comments = []
        for item in raw_comments:
            if isinstance(item, Comment):
                comments.append(item)
            elif isinstance(item, dict):
                comments.append(Comment.from_dict(item))
            else:
                raise ValueError(f"無效的留言資料: {item!r}")

        return cls(
            title=read_optional_str(data, "title"),
            content=read_optional_str(data, "content"),
            author=read_optional_str(data, "author"),
            comments=comments,
            id=read_optional_int(data, "id"),
        )
