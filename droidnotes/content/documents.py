"""Content documents: loading, routing, and directory scanning."""

from __future__ import annotations

import json
import logging
from pathlib import Path, PurePosixPath
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from ..config import CONTENT_EXTENSIONS, DOCS_ROUTE, META_FILE
from ..errors import ContentError
from .frontmatter import FrontMatter, split_front_matter

logger = logging.getLogger(__name__)


class Document(BaseModel):
    """A content document with validated front-matter."""

    path: str
    route: str
    slug: list[str]
    title: str
    description: str
    body: str
    extra: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_index(self) -> bool:
        return PurePosixPath(self.path).stem == "index"


class FolderMeta(BaseModel):
    """Optional per-directory `meta.json` (sidebar title and page order)."""

    title: str | None = None
    pages: list[str] = Field(default_factory=list)


def route_for(rel_path: str | Path, docs_route: str = DOCS_ROUTE) -> str:
    """Map a path relative to the content root to its URL route.

    `guide/intro.mdx` -> `/docs/guide/intro`, `guide/index.mdx` -> `/docs/guide`.
    """
    parts = list(PurePosixPath(Path(rel_path).as_posix()).with_suffix("").parts)
    if parts and parts[-1] == "index":
        parts = parts[:-1]
    return "/".join([docs_route.rstrip("/"), *parts]) if parts else docs_route


def slug_for(route: str, docs_route: str = DOCS_ROUTE) -> list[str]:
    rest = route[len(docs_route) :].strip("/")
    return rest.split("/") if rest else []


def read_front_matter(path: Path, root: Path) -> tuple[dict[str, Any], str]:
    rel = _rel(path, root)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentError(rel, f"cannot read document: {e}") from e
    return split_front_matter(text, path=rel)


def load_document(path: Path, root: Path) -> Document:
    """Load and validate one content document.

    Raises:
        ContentError: If the file cannot be read or its front-matter is invalid
    """
    rel = _rel(path, root)
    data, body = read_front_matter(path, root)
    if not data:
        raise ContentError(rel, "missing front-matter (title and description are required)")

    try:
        fm = FrontMatter.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ContentError(rel, f"invalid front-matter fields: {fields}") from e

    route = route_for(rel)
    return Document(
        path=rel,
        route=route,
        slug=slug_for(route),
        title=fm.title,
        description=fm.description,
        body=body,
        extra=fm.extras(),
    )


def iter_content_files(root: Path) -> list[Path]:
    """All content files under root, sorted, skipping hidden entries."""
    if not root.exists():
        return []
    files = []
    for p in root.rglob("*"):
        rel_parts = p.relative_to(root).parts
        if any(part.startswith((".", "_")) for part in rel_parts):
            continue
        if p.is_file() and p.suffix.lower() in CONTENT_EXTENSIONS:
            files.append(p)
    return sorted(files, key=lambda p: p.relative_to(root).as_posix())


def scan_documents(root: Path) -> tuple[list[Document], list[str]]:
    """Load every document under root.

    Returns:
        (documents sorted by path, warnings for documents that failed to load)
    """
    documents: list[Document] = []
    warnings: list[str] = []
    for path in iter_content_files(root):
        try:
            documents.append(load_document(path, root))
        except ContentError as e:
            logger.warning("Skipping %s", e)
            warnings.append(str(e))
            continue
        logger.debug("Loaded %s", path)
    return documents, warnings


def load_folder_meta(directory: Path) -> FolderMeta | None:
    meta_path = directory / META_FILE
    if not meta_path.exists():
        return None
    try:
        return FolderMeta.model_validate(json.loads(meta_path.read_text(encoding="utf-8")))
    except (json.JSONDecodeError, ValidationError) as e:
        raise ContentError(meta_path, f"invalid {META_FILE}: {e}") from e


def _rel(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
