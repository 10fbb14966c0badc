# Tutorial content for YouTube Shorts (vertical, under 60 seconds)
from __future__ import annotations

from ..models import TutorialStep


OVERVIEW = (
    'यह YouTube Short video "{title}" के editing style का विश्लेषण है। '
    "Shorts में quick cuts, fast-paced editing, और engaging visuals का उपयोग होता है।"
)

EDITING_STYLE = (
    "Fast-paced, vertical format (9:16), quick transitions, text overlays, "
    "trending music, attention-grabbing hooks in first 3 seconds"
)

STEPS = (
    TutorialStep(
        title="Footage Selection और Preparation",
        description="Vertical format (1080x1920) में video shoot करें या crop करें। Best moments को 15-60 seconds में fit करें।",
        tools="Adobe Premiere Pro, CapCut, InShot",
        timestamp="0:00-0:15",
    ),
    TutorialStep(
        title="Hook Creation (पहले 3 सेकंड)",
        description="Viewer को immediately grab करने के लिए shocking statement, question, या visually interesting clip से शुरू करें।",
        tools="Text animations, zoom effects",
        timestamp="0:00-0:03",
    ),
    TutorialStep(
        title="Quick Cuts और Transitions",
        description="हर 1-2 सेकंड में cut करें। Boring parts को remove करें। Fast-paced feel maintain करें।",
        tools="Cutting tools, transition presets",
        timestamp="Throughout",
    ),
    TutorialStep(
        title="Text Overlays और Captions",
        description="Key points को highlight करने के लिए animated text add करें। Auto-captions enable करें (85% लोग बिना sound देखते हैं)।",
        tools="Caption tools, text animation presets",
        timestamp="Throughout",
    ),
    TutorialStep(
        title="Music और Sound Effects",
        description="Trending audio या high-energy background music add करें। Sound effects से engagement बढ़ाएं।",
        tools="YouTube Audio Library, Epidemic Sound",
        timestamp="Throughout",
    ),
    TutorialStep(
        title="Visual Effects और Color Grading",
        description="Eye-catching effects, zoom punches, और vibrant colors use करें। Thumbnail-worthy moments create करें।",
        tools="Color grading tools, effect presets",
        timestamp="Throughout",
    ),
    TutorialStep(
        title="Call-to-Action",
        description="End में subscribe/follow reminder add करें। Next video का teaser दें।",
        tools="Text overlays, animations",
        timestamp="Last 5 seconds",
    ),
)

TECHNIQUES = (
    "Jump cuts हर 1-2 सेकंड",
    "Vertical 9:16 aspect ratio",
    "Auto-captions for accessibility",
    "Trending audio tracks",
    "Quick zoom effects",
    "Text overlays और animations",
    "Hook in first 3 seconds",
    "Fast-paced storytelling",
)

SOFTWARE = (
    "CapCut",
    "Adobe Premiere Pro",
    "InShot",
    "VN Video Editor",
    "Final Cut Pro",
)

TIPS = (
    "पहले 3 सेकंड सबसे important हैं - यहां hook ज़रूर डालें",
    "Mobile screen पर preview करें - 90% viewers mobile पर देखते हैं",
    "Trending sounds use करें - discover करने में मदद मिलती है",
    "Captions ज़रूर add करें - बिना sound 85% लोग देखते हैं",
    "Watch time 100% रखने की कोशिश करें - algorithm को पसंद आता है",
    "Vertical format में shoot करें - बाद में crop करना quality कम करता है",
)
