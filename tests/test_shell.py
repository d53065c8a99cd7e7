"""Tests for the root shell (document frame, fonts, chrome)."""

from __future__ import annotations

import re
import unittest

from droidnotes.site.shell import FONT_TOKENS, FontToken, RootProvider, fonts_stylesheet_url, root_shell


def _html_tag(doc: str) -> str:
    m = re.search(r"<html[^>]*>", doc)
    assert m is not None
    return m.group(0)


class TestFontTokens(unittest.TestCase):
    def test_two_fonts(self) -> None:
        self.assertEqual([t.family for t in FONT_TOKENS], ["JetBrains Mono", "Fira Code"])

    def test_class_and_variable_tokens(self) -> None:
        primary, secondary = FONT_TOKENS
        self.assertEqual(primary.class_name, "font-jetbrains-mono")
        self.assertIn("font-family", primary.css_rule())
        self.assertEqual(secondary.class_name, "font-var-fira-code")
        self.assertIn("--fira-code:", secondary.css_rule())

    def test_stylesheet_url_lists_families(self) -> None:
        url = fonts_stylesheet_url()
        self.assertIn("family=JetBrains+Mono", url)
        self.assertIn("family=Fira+Code", url)
        self.assertIn("subset=latin", url)

    def test_slug(self) -> None:
        self.assertEqual(FontToken("Source Code Pro").slug, "source-code-pro")


class TestRootShell(unittest.TestCase):
    def test_lang_and_font_classes(self) -> None:
        doc = root_shell("<p>x</p>", title="T")
        self.assertEqual(
            _html_tag(doc),
            '<html lang="en" class="font-jetbrains-mono font-var-fira-code">',
        )

    def test_children_never_alter_document_attributes(self) -> None:
        baseline = _html_tag(root_shell("", title="T"))
        for children in [
            '<html lang="fr" class="other">',
            "</html><html lang='de'>",
            "<script>document.documentElement.lang='es'</script>",
            "x" * 10000,
        ]:
            self.assertEqual(_html_tag(root_shell(children, title="T")), baseline)

    def test_title_and_description_escaped(self) -> None:
        doc = root_shell("", title="A <b>", description='say "hi"')
        self.assertIn("<title>A &lt;b&gt;</title>", doc)
        self.assertIn('content="say &quot;hi&quot;"', doc)

    def test_provider_wraps_children(self) -> None:
        doc = root_shell("<main>child</main>", title="T")
        self.assertIn('<header class="topbar">', doc)
        self.assertIn("data-theme-toggle", doc)
        self.assertIn("<main>child</main>", doc)
        self.assertNotIn('class="docs"', doc)

    def test_provider_with_sidebar(self) -> None:
        provider = RootProvider(base_path="/b", sidebar_html='<aside class="sidebar"></aside>')
        doc = root_shell("<article></article>", title="T", provider=provider)
        self.assertIn('<div class="docs">', doc)
        self.assertIn('href="/b/docs"', doc)


if __name__ == "__main__":
    unittest.main()
