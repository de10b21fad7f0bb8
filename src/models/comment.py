"""Comment data model.

This module defines the Comment data class attached to articles.
"""
from dataclasses import dataclass, field
from typing import Any, Optional

from .mapping import read_optional_int, read_optional_str


@dataclass
class Comment:
    """文章留言資料模型."""

    author: Optional[str] = None
    content: Optional[str] = None
    id: Optional[int] = field(default=None, compare=False, repr=False)

    def __hash__(self) -> int:
        return hash((self.author, self.content))

    def to_dict(self) -> dict:
        """Convert comment to dictionary."""
        return {
            "id": self.id,
            "author": self.author,
            "content": self.content,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Comment":
        """Create comment from dictionary."""
        return cls(
            author=read_optional_str(data, "author"),
            content=read_optional_str(data, "content"),
            id=read_optional_int(data, "id"),
        )
