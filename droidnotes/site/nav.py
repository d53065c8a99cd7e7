"""Docs navigation tree built from content documents and `meta.json` files."""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from pathlib import Path, PurePosixPath

from ..content.documents import Document, FolderMeta, load_folder_meta
from ..errors import ContentError
from .templates import link

ROOT_GROUP_TITLE = "Documentation"


@dataclass(frozen=True)
class NavItem:
    title: str
    route: str
    path: str


@dataclass
class NavGroup:
    key: str
    title: str
    items: list[NavItem] = field(default_factory=list)


@dataclass
class NavTree:
    groups: list[NavGroup] = field(default_factory=list)

    def flatten(self) -> list[NavItem]:
        """Items in reading order."""
        return [item for g in self.groups for item in g.items]

    def neighbours(self, route: str) -> tuple[NavItem | None, NavItem | None]:
        items = self.flatten()
        for i, item in enumerate(items):
            if item.route == route:
                prev = items[i - 1] if i > 0 else None
                nxt = items[i + 1] if i + 1 < len(items) else None
                return prev, nxt
        return None, None


def build_nav(
    documents: list[Document], content_root: Path, warnings: list[str] | None = None
) -> NavTree:
    """Group documents by directory and order them.

    Within a group, `index` comes first, then pages listed in the folder's
    `meta.json`, then everything else alphabetically. Groups follow the root
    `meta.json` page order, with the root group always first. An invalid
    `meta.json` is reported through `warnings` and ignored when a list is given;
    otherwise its ContentError propagates.
    """
    by_dir: dict[str, list[Document]] = {}
    for doc in documents:
        parent = PurePosixPath(doc.path).parent.as_posix()
        by_dir.setdefault("" if parent == "." else parent, []).append(doc)

    def _meta(directory: Path) -> FolderMeta | None:
        try:
            return load_folder_meta(directory)
        except ContentError as e:
            if warnings is None:
                raise
            warnings.append(str(e))
            return None

    metas = {key: _meta(content_root / key) for key in by_dir}
    root_meta = metas[""] if "" in metas else _meta(content_root)
    root_order = root_meta.pages if root_meta else []

    groups = []
    for key in sorted(by_dir, key=lambda k: _group_sort_key(k, root_order)):
        meta = metas[key]
        order = meta.pages if meta else []
        docs = sorted(by_dir[key], key=lambda d: _page_sort_key(d, order))
        groups.append(
            NavGroup(
                key=key,
                title=_group_title(key, meta),
                items=[NavItem(title=d.title, route=d.route, path=d.path) for d in docs],
            )
        )
    return NavTree(groups=groups)


def render_sidebar(tree: NavTree, active_route: str | None = None, base_path: str = "") -> str:
    lines = ['<aside class="sidebar">']
    for group in tree.groups:
        lines.append(f"<h4>{escape(group.title)}</h4>")
        lines.append("<ul>")
        for item in group.items:
            cls = "active" if item.route == active_route else None
            lines.append(f"<li>{link(base_path + item.route, item.title, cls=cls)}</li>")
        lines.append("</ul>")
    lines.append("</aside>")
    return "\n".join(lines)


def _group_title(key: str, meta: FolderMeta | None) -> str:
    if meta and meta.title:
        return meta.title
    if not key:
        return ROOT_GROUP_TITLE
    name = PurePosixPath(key).name
    return name.replace("-", " ").replace("_", " ").title()


def _group_sort_key(key: str, root_order: list[str]) -> tuple[int, int, str]:
    if not key:
        return (0, 0, "")
    top = PurePosixPath(key).parts[0]
    if top in root_order:
        return (1, root_order.index(top), key)
    return (2, 0, key)


def _page_sort_key(doc: Document, order: list[str]) -> tuple[int, int, str]:
    if doc.is_index:
        return (0, 0, "")
    stem = PurePosixPath(doc.path).stem
    if stem in order:
        return (1, order.index(stem), stem)
    return (2, 0, stem)
