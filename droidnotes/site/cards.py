"""Feature cards shown on the landing page."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

_ZWJ = "\u200d"


@dataclass(frozen=True)
class FeatureCard:
    """A small tile summarizing one documentation topic."""

    title: str
    description: str
    icon: str
    href: str | None = None

    def __post_init__(self) -> None:
        for name in ("title", "description", "icon"):
            if not getattr(self, name).strip():
                raise ValueError(f"FeatureCard.{name} must not be empty")
        if not is_single_glyph(self.icon):
            raise ValueError(f"FeatureCard.icon must be a single glyph, got {self.icon!r}")


def is_single_glyph(text: str) -> bool:
    """True when text renders as one glyph.

    Combining marks, variation selectors, skin-tone modifiers and ZWJ-joined
    emoji attach to the preceding character; a pair of regional indicators is
    one flag.
    """
    bases = 0
    joined = False
    pending_flag = False
    for ch in text.strip():
        cp = ord(ch)
        if ch == _ZWJ:
            joined = True
            continue
        if unicodedata.category(ch) in ("Mn", "Me", "Cf") or 0x1F3FB <= cp <= 0x1F3FF:
            continue
        if joined:
            joined = False
            continue
        if 0x1F1E6 <= cp <= 0x1F1FF:
            if pending_flag:
                pending_flag = False
                continue
            pending_flag = True
        else:
            pending_flag = False
        bases += 1
    return bases == 1


FEATURE_CARDS: tuple[FeatureCard, ...] = (
    FeatureCard(
        title="Kotlin OOP",
        description="Encapsulation, inheritance, polymorphism & abstraction for Android classes",
        icon="📐",
    ),
    FeatureCard(
        title="Kotlin Functions",
        description="Declarative, higher‑order & extension functions in Android code",
        icon="🔧",
    ),
    FeatureCard(
        title="Coroutines & Flows",
        description="Suspend, launch & Flow streams for async tasks in Android",
        icon="🚀",
    ),
    FeatureCard(
        title="Conditionals & Loops",
        description="if/when and for/while constructs for Kotlin control flow",
        icon="🔁",
    ),
    FeatureCard(
        title="Arrays & Lists",
        description="Fixed & dynamic collections: Array, List, Set, Map usage",
        icon="📋",
    ),
    FeatureCard(
        title="Compose Basics",
        description="Composable functions, state & modifiers for UI in Jetpack Compose",
        icon="🎨",
    ),
)
