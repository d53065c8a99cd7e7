"""Tests for the docs navigation tree."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from droidnotes.content.documents import scan_documents
from droidnotes.errors import ContentError
from droidnotes.site.nav import build_nav, render_sidebar


def _write(path: Path, title: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"---\ntitle: {title}\ndescription: About {title}\n---\nBody\n", encoding="utf-8")


class TestBuildNav(unittest.TestCase):
    def test_orders_groups_and_pages(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            _write(root / "index.mdx", "Home")
            _write(root / "a.mdx", "A")
            _write(root / "b.mdx", "B")
            _write(root / "zeta" / "one.mdx", "One")
            _write(root / "alpha_topics" / "x.mdx", "X")
            _write(root / "alpha_topics" / "index.mdx", "Alpha")
            (root / "meta.json").write_text(json.dumps({"title": "Notes", "pages": ["b", "zeta"]}), encoding="utf-8")

            docs, _ = scan_documents(root)
            tree = build_nav(docs, root)

            self.assertEqual([g.title for g in tree.groups], ["Notes", "Zeta", "Alpha Topics"])
            self.assertEqual([i.title for i in tree.groups[0].items], ["Home", "B", "A"])
            self.assertEqual([i.title for i in tree.groups[2].items], ["Alpha", "X"])

            flat = [i.route for i in tree.flatten()]
            self.assertEqual(flat[0], "/docs")
            prev, nxt = tree.neighbours("/docs/a")
            self.assertEqual(prev.route, "/docs/b")
            self.assertEqual(nxt.route, "/docs/zeta/one")
            self.assertEqual(tree.neighbours("/docs"), (None, tree.flatten()[1]))

    def test_invalid_meta(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            _write(root / "a.mdx", "A")
            (root / "meta.json").write_text("{not json", encoding="utf-8")
            docs, _ = scan_documents(root)

            with self.assertRaises(ContentError):
                build_nav(docs, root)

            warnings: list[str] = []
            tree = build_nav(docs, root, warnings=warnings)
            self.assertEqual(len(warnings), 1)
            self.assertEqual(tree.groups[0].title, "Documentation")

    def test_render_sidebar_marks_active(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            _write(root / "a.mdx", "A & B")
            docs, _ = scan_documents(root)
            html = render_sidebar(build_nav(docs, root), active_route="/docs/a", base_path="/p")
            self.assertIn('<a href="/p/docs/a" class="active">A &amp; B</a>', html)


if __name__ == "__main__":
    unittest.main()
