# Enable postponed annotations to avoid runtime import issues and allow future-style typing
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class VideoType(str, Enum):
    """Kind of video a tutorial is generated for."""

    LONG = "long"
    SHORT = "short"

    @classmethod
    def parse(cls, value: Any) -> "VideoType":
        # Only an explicit "short" selects the short-form branch; anything else is long-form
        if value == cls.SHORT.value or value is cls.SHORT:
            return cls.SHORT
        return cls.LONG


@dataclass(frozen=True)
class TutorialRequest:
    """A single user submission from the form."""

    # Raw URL exactly as submitted; may be empty or not a string
    video_url: Any
    video_type: VideoType = VideoType.LONG

    @classmethod
    def from_json(cls, body: Optional[dict]) -> "TutorialRequest":
        body = body or {}
        return cls(
            video_url=body.get("videoUrl"),
            video_type=VideoType.parse(body.get("videoType")),
        )


@dataclass(frozen=True)
class VideoMetadata:
    """Subset of an oEmbed response; only `title` is required."""

    title: str
    author_name: Optional[str] = None
    author_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    provider_name: Optional[str] = None
    # Full decoded oEmbed body
    raw: dict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_oembed(cls, data: dict) -> "VideoMetadata":
        title = data["title"]
        if not isinstance(title, str):
            raise TypeError(f"oEmbed title is not a string: {title!r}")
        return cls(
            title=title,
            author_name=data.get("author_name"),
            author_url=data.get("author_url"),
            thumbnail_url=data.get("thumbnail_url"),
            provider_name=data.get("provider_name"),
            raw=dict(data),
        )


@dataclass(frozen=True)
class TutorialStep:
    title: str
    description: str
    tools: str
    timestamp: str

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "tools": self.tools,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class TutorialDocument:
    """The editing tutorial returned to the caller."""

    overview: str
    editing_style: str
    steps: tuple[TutorialStep, ...]
    techniques: tuple[str, ...]
    software: tuple[str, ...]
    tips: tuple[str, ...]

    def to_dict(self) -> dict:
        # Wire format keeps the camelCase keys the frontend reads
        return {
            "overview": self.overview,
            "editingStyle": self.editing_style,
            "steps": [s.to_dict() for s in self.steps],
            "techniques": list(self.techniques),
            "software": list(self.software),
            "tips": list(self.tips),
        }
