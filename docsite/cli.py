"""CLI entry point for docsite."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import (
    CONTENT_DIR,
    DEFAULT_COLUMN_CAP,
    DEFAULT_VIEWPORT_HEIGHT,
    DEFAULT_VIEWPORT_WIDTH,
    LOG_FORMAT,
    LOG_LEVEL,
    SITE_CONFIG_NAME,
)
from .content.source import MalformedContentError, NotFoundError

logger = logging.getLogger(__name__)

_FAILURES = (NotFoundError, MalformedContentError, ValueError, OSError)


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="docsite",
        description="Build documentation pages laid out for the viewport.",
    )
    parser.add_argument("--version", "-v", action="version", version=f"docsite {__version__}")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_build = sub.add_parser("build", help="Build the static site")
    p_build.add_argument("--content", type=Path, default=CONTENT_DIR, help="Content directory")
    p_build.add_argument("--config", type=Path, default=None, help=f"Site config (default: <content>/{SITE_CONFIG_NAME})")
    p_build.add_argument("--out", "-o", type=Path, default=Path("./site"), help="Site output directory")
    p_build.add_argument("--width", "-w", type=int, default=None, help="Viewport width to render at")

    p_render = sub.add_parser("render", help="Render one page through a sequence of viewport widths")
    p_render.add_argument("page_id", help="Content id, e.g. examples/flow")
    p_render.add_argument("--content", type=Path, default=CONTENT_DIR, help="Content directory")
    p_render.add_argument("--cap", type=int, default=DEFAULT_COLUMN_CAP, help="Column cap in pixels")
    p_render.add_argument(
        "--width",
        "-w",
        type=int,
        action="append",
        dest="widths",
        help="Viewport width; repeat to replay resizes (default: %d)" % DEFAULT_VIEWPORT_WIDTH,
    )
    p_render.add_argument("--height", type=int, default=DEFAULT_VIEWPORT_HEIGHT, help="Viewport height")
    p_render.add_argument("--out", "-o", type=Path, default=None, help="Write HTML here instead of stdout")

    p_list = sub.add_parser("list", help="List content ids")
    p_list.add_argument("--content", type=Path, default=CONTENT_DIR, help="Content directory")

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.cmd == "build":
        return _cmd_build(args)
    if args.cmd == "render":
        return _cmd_render(args)
    if args.cmd == "list":
        return _cmd_list(args)

    parser.print_help()
    return 2


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _cmd_build(args: Any) -> int:
    from .site.build import build_site

    try:
        report = build_site(args.content, args.out, config_path=args.config, viewport_width=args.width)
    except _FAILURES as e:
        logger.debug("Build failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Site generated")
    print(f"  Output: {report.get('out_dir')}")
    print(f"  Pages: {report.get('pages')}")
    print(f"  Viewport: {report.get('viewport_width')}px")
    total_bytes = int(report.get("total_bytes") or 0)
    print(f"  Size: {total_bytes / 1024:.1f} KB")
    return 0


def _cmd_render(args: Any) -> int:
    from .content.source import ContentSource
    from .layout.compose import LayoutComposer
    from .layout.tree import PageTree
    from .render.html import FileSink, render_page
    from .render.renderer import PageRenderer
    from .render.viewport import ViewportFeed, ViewportSize

    widths = args.widths or [DEFAULT_VIEWPORT_WIDTH]
    file_sink = FileSink(args.out) if args.out else None

    def _sink(tree: PageTree) -> None:
        print(f"  {tree.viewport_width:g}px → column {tree.column_width:g}px", file=sys.stderr)
        if file_sink is not None:
            file_sink(tree)

    try:
        source = ContentSource.from_directory(args.content, exclude=[SITE_CONFIG_NAME])
        composer = LayoutComposer(cap=args.cap)
        renderer = PageRenderer.for_page(source, args.page_id, composer, sink=_sink)
        feed = ViewportFeed()
        renderer.activate(feed)
        for w in widths:
            feed.publish(ViewportSize(width=w, height=args.height))
        renderer.teardown()
    except _FAILURES as e:
        logger.debug("Render failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if file_sink is not None:
        print(f"✓ Rendered {args.page_id} ({renderer.render_count} layouts) to {file_sink.path}")
    elif renderer.tree is not None:
        sys.stdout.write(render_page(renderer.tree))
    return 0


def _cmd_list(args: Any) -> int:
    from .content.source import ContentSource

    try:
        source = ContentSource.from_directory(args.content, exclude=[SITE_CONFIG_NAME])
    except _FAILURES as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    ids = source.ids()
    if not ids:
        print("No content found")
        return 0
    for cid in ids:
        print(cid)
    return 0


if __name__ == "__main__":
    app()
