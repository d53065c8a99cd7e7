"""Front-matter presence scan over all content files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..errors import ContentError
from .documents import iter_content_files, read_front_matter, route_for


@dataclass(frozen=True)
class LintIssue:
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class LintReport:
    files: int = 0
    issues: list[LintIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


def lint_content(root: Path) -> LintReport:
    """Check that every document declares a non-blank title and description.

    Also reports documents whose paths resolve to the same route
    (e.g. `guide.mdx` and `guide/index.mdx`).
    """
    report = LintReport()
    routes: dict[str, str] = {}

    for path in iter_content_files(root):
        report.files += 1
        rel = path.relative_to(root).as_posix()

        route = route_for(rel)
        if route in routes:
            report.issues.append(LintIssue(rel, f"route {route} already provided by {routes[route]}"))
        else:
            routes[route] = rel

        try:
            data, _ = read_front_matter(path, root)
        except ContentError as e:
            report.issues.append(LintIssue(rel, e.message))
            continue

        if not data:
            report.issues.append(LintIssue(rel, "missing front-matter"))
            continue

        for key in ("title", "description"):
            value = data.get(key)
            if value is None:
                report.issues.append(LintIssue(rel, f"missing {key}"))
            elif not isinstance(value, str):
                report.issues.append(LintIssue(rel, f"{key} must be a string"))
            elif not value.strip():
                report.issues.append(LintIssue(rel, f"blank {key}"))

    return report
