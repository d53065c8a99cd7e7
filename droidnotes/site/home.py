"""Landing page: hero banner plus the feature cards."""

from __future__ import annotations

from collections.abc import Iterable

from ..config import CTA_LABEL, DOCS_ROUTE, SITE_TAGLINE, SITE_TITLE
from .cards import FEATURE_CARDS, FeatureCard
from .shell import RootProvider, root_shell
from .templates import cards_grid, hero


def landing_cards() -> list[FeatureCard]:
    return list(FEATURE_CARDS)


def render_home(cards: Iterable[FeatureCard] = FEATURE_CARDS, docs_href: str = DOCS_ROUTE) -> str:
    return "\n".join(
        [
            '<main class="home">',
            hero(SITE_TITLE, SITE_TAGLINE, docs_href, CTA_LABEL),
            '<section id="features">',
            cards_grid(cards),
            "</section>",
            "</main>",
        ]
    )


def build_home_page(base_path: str = "") -> str:
    base = base_path.rstrip("/")
    return root_shell(
        render_home(docs_href=base + DOCS_ROUTE),
        title=SITE_TITLE,
        description=SITE_TAGLINE,
        provider=RootProvider(base_path=base),
    )
