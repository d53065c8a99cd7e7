"""Content documents, front-matter, and linting."""

from .documents import Document, FolderMeta, load_document, route_for, scan_documents
from .frontmatter import FrontMatter, split_front_matter
from .lint import LintIssue, LintReport, lint_content

__all__ = [
    "Document",
    "FolderMeta",
    "FrontMatter",
    "LintIssue",
    "LintReport",
    "lint_content",
    "load_document",
    "route_for",
    "scan_documents",
    "split_front_matter",
]
