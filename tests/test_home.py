"""Tests for the landing page and feature cards."""

from __future__ import annotations

import re
import unittest

from droidnotes.config import DOCS_ROUTE, SITE_TITLE
from droidnotes.site.cards import FEATURE_CARDS, FeatureCard, is_single_glyph
from droidnotes.site.home import build_home_page, landing_cards, render_home

EXPECTED_TITLES = {
    "Kotlin OOP",
    "Kotlin Functions",
    "Coroutines & Flows",
    "Conditionals & Loops",
    "Arrays & Lists",
    "Compose Basics",
}


class TestFeatureCards(unittest.TestCase):
    def test_exactly_six_cards_with_expected_titles(self) -> None:
        cards = landing_cards()
        self.assertEqual(len(cards), 6)
        self.assertEqual({c.title for c in cards}, EXPECTED_TITLES)

    def test_cards_have_non_empty_fields(self) -> None:
        for c in landing_cards():
            self.assertTrue(c.title.strip())
            self.assertTrue(c.description.strip())
            self.assertTrue(c.icon.strip())

    def test_card_order_is_fixed(self) -> None:
        self.assertEqual(landing_cards()[0].title, "Kotlin OOP")
        self.assertEqual(landing_cards()[-1].title, "Compose Basics")

    def test_empty_field_rejected(self) -> None:
        with self.assertRaises(ValueError):
            FeatureCard(title="", description="d", icon="x")
        with self.assertRaises(ValueError):
            FeatureCard(title="t", description="d", icon=" ")

    def test_icon_must_be_single_glyph(self) -> None:
        for icon in ["ab", "🚀🚀", "📐 x"]:
            with self.assertRaises(ValueError):
                FeatureCard(title="t", description="d", icon=icon)
        for icon in ["🎨", "\u2764\ufe0f", "\U0001f44d\U0001f3fd", "\U0001f469\u200d\U0001f4bb", "\U0001f1f3\U0001f1f1", "e\u0301"]:
            self.assertTrue(is_single_glyph(icon), icon)
            FeatureCard(title="t", description="d", icon=icon)
        self.assertFalse(is_single_glyph("\U0001f1f3\U0001f1f1\U0001f1e7\U0001f1ea"))

    def test_cards_are_immutable(self) -> None:
        with self.assertRaises(AttributeError):
            FEATURE_CARDS[0].title = "Other"  # type: ignore[misc]


class TestRenderHome(unittest.TestCase):
    def test_renders_six_cards_in_order(self) -> None:
        html = render_home()
        self.assertEqual(html.count('<div class="card"'), 6)
        titles = re.findall(r"<h3>(.*?)</h3>", html)
        self.assertEqual(
            titles,
            [
                "Kotlin OOP",
                "Kotlin Functions",
                "Coroutines &amp; Flows",
                "Conditionals &amp; Loops",
                "Arrays &amp; Lists",
                "Compose Basics",
            ],
        )

    def test_cta_points_to_docs_index(self) -> None:
        html = render_home()
        m = re.search(r'<a href="([^"]+)" class="cta">Go to docs</a>', html)
        self.assertIsNotNone(m)
        self.assertEqual(m.group(1), DOCS_ROUTE)

    def test_hero_contains_title_and_tagline(self) -> None:
        html = render_home()
        self.assertIn(f"<h1>{SITE_TITLE}</h1>", html)
        self.assertIn("You don&#x27;t need to know that.", html)
        self.assertIn('<section id="features">', html)

    def test_full_page_uses_base_path_for_cta(self) -> None:
        html = build_home_page(base_path="/notes/")
        self.assertIn('href="/notes/docs" class="cta"', html)
        self.assertTrue(html.startswith("<!doctype html>"))


if __name__ == "__main__":
    unittest.main()
