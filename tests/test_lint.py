"""Tests for the front-matter presence scan."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from droidnotes.content.lint import lint_content

REPO_CONTENT = Path(__file__).resolve().parents[1] / "content" / "docs"


class TestLintContent(unittest.TestCase):
    def test_shipped_content_declares_title_and_description(self) -> None:
        report = lint_content(REPO_CONTENT)
        self.assertGreater(report.files, 0)
        self.assertEqual([str(i) for i in report.issues], [])
        self.assertTrue(report.ok)

    def test_reports_each_problem(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "ok.mdx").write_text("---\ntitle: A\ndescription: B\n---\n", encoding="utf-8")
            (root / "none.mdx").write_text("Body only\n", encoding="utf-8")
            (root / "no_desc.mdx").write_text("---\ntitle: A\n---\n", encoding="utf-8")
            (root / "blank.mdx").write_text('---\ntitle: ""\ndescription: B\n---\n', encoding="utf-8")
            (root / "broken.mdx").write_text("---\ntitle: [x\n---\n", encoding="utf-8")

            report = lint_content(root)
            self.assertEqual(report.files, 5)
            self.assertFalse(report.ok)
            by_path = {i.path: i.message for i in report.issues}
            self.assertNotIn("ok.mdx", by_path)
            self.assertEqual(by_path["none.mdx"], "missing front-matter")
            self.assertEqual(by_path["no_desc.mdx"], "missing description")
            self.assertEqual(by_path["blank.mdx"], "blank title")
            self.assertIn("invalid YAML", by_path["broken.mdx"])

    def test_reports_duplicate_routes(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "guide").mkdir()
            fm = "---\ntitle: A\ndescription: B\n---\n"
            (root / "guide.mdx").write_text(fm, encoding="utf-8")
            (root / "guide" / "index.mdx").write_text(fm, encoding="utf-8")

            report = lint_content(root)
            self.assertEqual(len(report.issues), 1)
            self.assertIn("/docs/guide", report.issues[0].message)


if __name__ == "__main__":
    unittest.main()
