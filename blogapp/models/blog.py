"""
Blog document schema.

Blogs live in the "blogs" MongoDB collection. The pydantic model validates
documents on the way in and out; field names are stored in snake_case and
exposed in camelCase through ``to_dto``.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class MediaType(str, Enum):
    IMAGE = "Image"
    VIDEO = "Video"


class MediaItem(BaseModel):
    url: str
    type: MediaType
    caption: Optional[str] = None
    order: int = 0


class Blog(BaseModel):
    id: Optional[str] = None

    user_id: int
    username: str
    category_id: Optional[int] = None
    category_name: Optional[str] = None

    title: str
    content: str
    summary: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    media_items: List[MediaItem] = Field(default_factory=list)

    view_count: int = 0
    is_published: bool = False

    created_at: datetime = Field(default_factory=lambda: utcnow())
    updated_at: Optional[datetime] = None
    published_at: Optional[datetime] = None

    def set_published(self, is_published, now=None):
        """Flip the publish flag; ``published_at`` is stamped once, on the first publish."""
        if is_published and not self.is_published and self.published_at is None:
            self.published_at = now or utcnow()
        self.is_published = is_published

    @classmethod
    def from_document(cls, doc):
        data = dict(doc)
        data["id"] = str(data.pop("_id"))
        return cls.model_validate(data)

    def to_document(self):
        doc = self.model_dump(mode="python", exclude={"id"})
        doc["media_items"] = [
            {**item, "type": item["type"].value} for item in doc["media_items"]
        ]
        return doc

    def to_dto(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "username": self.username,
            "categoryId": self.category_id,
            "categoryName": self.category_name,
            "title": self.title,
            "content": self.content,
            "summary": self.summary,
            "tags": list(self.tags),
            "mediaItems": [
                {
                    "url": m.url,
                    "type": m.type.value,
                    "caption": m.caption,
                    "order": m.order,
                }
                for m in self.media_items
            ],
            "viewCount": self.view_count,
            "isPublished": self.is_published,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
            "publishedAt": _iso(self.published_at),
        }


def utcnow():
    # naive UTC at millisecond precision, matching what MongoDB hands back
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000, tzinfo=None)


def _iso(value):
    return value.isoformat() if value else None
