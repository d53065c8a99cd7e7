"""Landing page, root shell, and static site building."""

from .build import build_site
from .cards import FEATURE_CARDS, FeatureCard
from .home import build_home_page, landing_cards, render_home
from .shell import FONT_TOKENS, FontToken, RootProvider, root_shell

__all__ = [
    "FEATURE_CARDS",
    "FONT_TOKENS",
    "FeatureCard",
    "FontToken",
    "RootProvider",
    "build_home_page",
    "build_site",
    "landing_cards",
    "render_home",
    "root_shell",
]
