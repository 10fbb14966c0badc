# Tutorial content for regular long-form YouTube videos
from __future__ import annotations

from ..models import TutorialStep


OVERVIEW = (
    'यह YouTube long-form video "{title}" के editing style का विश्लेषण है। '
    "Professional editing में storytelling, pacing, और viewer retention पर focus होता है।"
)

EDITING_STYLE = (
    "Story-driven editing, varied pacing, B-roll integration, music layering, "
    "professional color grading, strategic cuts for retention"
)

STEPS = (
    TutorialStep(
        title="Project Setup और Organization",
        description="Footage को organize करें, bins/folders बनाएं, sequence settings configure करें (1920x1080, 24-60fps)।",
        tools="Premiere Pro, DaVinci Resolve, Final Cut Pro",
        timestamp="Pre-production",
    ),
    TutorialStep(
        title="Story Structure और Script Editing",
        description="Video को acts में divide करें (intro, body, conclusion)। Story flow optimize करें, boring parts cut करें।",
        tools="Script analysis, rough cut",
        timestamp="0:00-2:00 (Intro)",
    ),
    TutorialStep(
        title="A-Roll Editing (Main Footage)",
        description='Main talking head या footage को edit करें। Jump cuts से "ums" और pauses remove करें। Natural flow maintain करें।',
        tools="J & L cuts, jump cut smoothing",
        timestamp="Throughout",
    ),
    TutorialStep(
        title="B-Roll Integration",
        description="A-roll के साथ relevant B-roll overlay करें। Visual interest बढ़ाएं, concepts को illustrate करें।",
        tools="Stock footage, screen recordings, graphics",
        timestamp="Throughout",
    ),
    TutorialStep(
        title="Music और Sound Design",
        description="Background music layers add करें। Sound effects से key moments emphasize करें। Audio levels balance करें।",
        tools="Audio mixer, EQ, compression",
        timestamp="Throughout",
    ),
    TutorialStep(
        title="Graphics और Text Overlays",
        description="Lower thirds, titles, infographics add करें। Key points को visually reinforce करें।",
        tools="Motion graphics templates, After Effects",
        timestamp="Throughout",
    ),
    TutorialStep(
        title="Color Grading और Correction",
        description="Consistent look create करें। Skin tones fix करें। Cinematic या brand-specific color grade apply करें।",
        tools="Lumetri Color, DaVinci Resolve",
        timestamp="Final pass",
    ),
    TutorialStep(
        title="Transitions और Effects",
        description="Smooth transitions add करें (cuts, fades, whip pans)। Over-editing से बचें।",
        tools="Transition presets, custom animations",
        timestamp="Throughout",
    ),
    TutorialStep(
        title="Retention Editing",
        description="Pattern interrupts add करें (zoom, graphic, sound effect) हर 15-30 seconds। Viewer engagement maintain करें।",
        tools="Zoom effects, sound effects, visual changes",
        timestamp="Throughout",
    ),
    TutorialStep(
        title="Final Polish और Export",
        description="Audio mix finalize करें, color grading review करें, export settings optimize करें।",
        tools="Export presets for YouTube (H.264, high bitrate)",
        timestamp="Post-production",
    ),
)

TECHNIQUES = (
    "J-cuts और L-cuts for smooth audio transitions",
    "Jump cuts for pacing",
    "B-roll overlay (70-80% coverage)",
    "Music layering और dynamic audio",
    "Color grading for consistency",
    "Pattern interrupts हर 15-30 seconds",
    "Graphics और lower thirds",
    "Strategic pacing changes",
    "Sound design और effects",
)

SOFTWARE = (
    "Adobe Premiere Pro",
    "DaVinci Resolve",
    "Final Cut Pro",
    "After Effects (graphics)",
    "Audition (audio)",
)

TIPS = (
    "पहले 30 seconds में hook दें - viewer retention के लिए critical",
    "B-roll से visual variety बनाए रखें - monotony तोड़ता है",
    "Music से emotional tone set करें - storytelling enhance करता है",
    "Pattern interrupts से viewer attention maintain करें",
    "Audio quality पर ध्यान दें - bad audio = viewers leave",
    "Color grade consistent रखें - professional look देता है",
    "Export से पहले different devices पर preview करें",
    "Analytics देखें - कहां viewers drop off करते हैं, वहां editing improve करें",
)
