"""CLI entry point for Android Notes."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import BASE_PATH, CONTENT_DIR, OUT_DIR, PUBLIC_DIR
from .errors import DroidNotesError


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="droidnotes",
        description="Android Notes: build the static documentation site.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"droidnotes {__version__}",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_build = sub.add_parser("build", help="Build the static site")
    p_build.add_argument("--content", "-c", type=Path, default=CONTENT_DIR, help="Content directory")
    p_build.add_argument("--public", "-p", type=Path, default=PUBLIC_DIR, help="Static assets directory")
    p_build.add_argument("--out", "-o", type=Path, default=OUT_DIR, help="Site output directory")
    p_build.add_argument("--base-path", default=BASE_PATH, help="URL prefix when not served from /")
    p_build.add_argument("--strict", action="store_true", help="Fail when the build reports warnings")
    p_build.add_argument("--no-clean", action="store_true", help="Keep existing files in the output directory")

    p_lint = sub.add_parser("lint", help="Check that every document declares title and description")
    p_lint.add_argument("--content", "-c", type=Path, default=CONTENT_DIR, help="Content directory")

    sub.add_parser("cards", help="List the landing page feature cards")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "build":
        return _cmd_build(args)
    if args.cmd == "lint":
        return _cmd_lint(args)
    if args.cmd == "cards":
        return _cmd_cards(args)

    parser.print_help()
    return 2


def _cmd_build(args: Any) -> int:
    from .site.build import build_site

    if not args.content.is_dir():
        print(f"Error: content directory not found: {args.content}", file=sys.stderr)
        return 1

    try:
        report = build_site(
            args.content,
            args.out,
            public_dir=args.public,
            base_path=args.base_path,
            clean=not args.no_clean,
        )
    except (DroidNotesError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Site generated")
    print(f"  Output: {report.get('out_dir')}")
    print(f"  Pages: {report.get('pages')}")
    print(f"  Documents: {report.get('documents')}")
    print(f"  Assets: {report.get('assets')}")
    total_bytes = int(report.get("total_bytes") or 0)
    print(f"  Size: {total_bytes / 1024:.1f} KB")

    warnings = report.get("warnings") or []
    if warnings:
        print(f"\nWarnings ({len(warnings)}):")
        for w in warnings[:10]:
            print(f"  - {w}")
        if len(warnings) > 10:
            print(f"  ... and {len(warnings) - 10} more")

    return 1 if warnings and args.strict else 0


def _cmd_lint(args: Any) -> int:
    from .content.lint import lint_content

    if not args.content.is_dir():
        print(f"Error: content directory not found: {args.content}", file=sys.stderr)
        return 1

    report = lint_content(args.content)
    for issue in report.issues:
        print(str(issue))

    if report.ok:
        print(f"✓ {report.files} documents OK")
        return 0
    print(f"\n{len(report.issues)} issue(s) in {report.files} documents", file=sys.stderr)
    return 1


def _cmd_cards(args: Any) -> int:
    from .site.home import landing_cards

    for card in landing_cards():
        print(f"{card.icon}  {card.title:22} {card.description}")
    return 0


if __name__ == "__main__":
    app()
