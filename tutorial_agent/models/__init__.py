# Enable postponed annotations to avoid runtime import issues and allow future-style typing
from __future__ import annotations

from .tutorial import (
    TutorialDocument,
    TutorialRequest,
    TutorialStep,
    VideoMetadata,
    VideoType,
)

__all__ = [
    "TutorialDocument",
    "TutorialRequest",
    "TutorialStep",
    "VideoMetadata",
    "VideoType",
]
