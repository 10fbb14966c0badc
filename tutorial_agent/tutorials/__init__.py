"""
Static editing tutorials.

Two fixed templates exist, one per `VideoType`. The only input-dependent
part of a generated document is the video title inside the overview
sentence; every other field is the template's literal content.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..models import TutorialDocument, TutorialStep, VideoType
from . import long_form, short_form


@dataclass(frozen=True)
class TutorialTemplate:
    # str.format pattern with a single `{title}` placeholder
    overview: str
    editing_style: str
    steps: tuple[TutorialStep, ...]
    techniques: tuple[str, ...]
    software: tuple[str, ...]
    tips: tuple[str, ...]

    def render(self, title: str) -> TutorialDocument:
        return TutorialDocument(
            overview=self.overview.format(title=title),
            editing_style=self.editing_style,
            steps=self.steps,
            techniques=self.techniques,
            software=self.software,
            tips=self.tips,
        )


def _from_module(module) -> TutorialTemplate:
    return TutorialTemplate(
        overview=module.OVERVIEW,
        editing_style=module.EDITING_STYLE,
        steps=module.STEPS,
        techniques=module.TECHNIQUES,
        software=module.SOFTWARE,
        tips=module.TIPS,
    )


LONG_FORM = _from_module(long_form)
SHORT_FORM = _from_module(short_form)

TEMPLATES = {
    VideoType.LONG: LONG_FORM,
    VideoType.SHORT: SHORT_FORM,
}


def generate_tutorial(video_type, title: str) -> TutorialDocument:
    """Build the tutorial for `video_type`, falling back to long-form."""
    template = TEMPLATES.get(VideoType.parse(video_type), LONG_FORM)
    return template.render(title)


__all__ = [
    "LONG_FORM",
    "SHORT_FORM",
    "TEMPLATES",
    "TutorialTemplate",
    "generate_tutorial",
]
