"""Static site generator: every configured page rendered at one viewport."""

from __future__ import annotations

import logging
import posixpath
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

from ..config import SITE_CONFIG_NAME
from ..content.source import ContentSource
from ..layout.compose import LayoutComposer, NavLink
from ..render.html import FileSink
from ..render.renderer import PageRenderer
from ..render.templates import PageRow, html_doc, link, pages_index
from ..render.viewport import ViewportFeed, ViewportSize
from .config import PageConfig, SiteConfig, load_site_config

logger = logging.getLogger(__name__)


def build_site(
    content_dir: Path,
    out_dir: Path,
    config_path: Path | None = None,
    viewport_width: int | None = None,
) -> dict[str, Any]:
    """Build a static HTML site from a content directory.

    The site config is read from `config_path`, else from `site.json` inside
    `content_dir`. Without one, every content id is published with the
    default cap.
    """
    content_dir = content_dir.resolve()
    out_dir = out_dir.resolve()
    out_dir.mkdir(parents=True, exist_ok=True)

    if config_path is None and (content_dir / SITE_CONFIG_NAME).exists():
        config_path = content_dir / SITE_CONFIG_NAME
    config = load_site_config(config_path) if config_path is not None else SiteConfig()

    source = ContentSource.from_directory(content_dir, exclude=[SITE_CONFIG_NAME])
    pages = config.pages or [PageConfig(id=cid) for cid in source.ids()]
    _check_unique(pages)

    nav = [NavLink(label=n.label, href=n.href) for n in config.nav]
    feed = ViewportFeed()

    # Loading happens up front; a bad page aborts before anything is rendered.
    renderers: list[PageRenderer] = []
    for page in pages:
        content = source.load(page.id)
        if page.title:
            content = content.model_copy(update={"title": page.title})
        page_nav = [NavLink(label=n.label, href=relative_href(n.href, page.id)) for n in nav]
        composer = LayoutComposer(cap=page.cap, nav=page_nav)
        sink = FileSink(out_dir / f"{page.id}.html", site_title=config.title)
        renderers.append(PageRenderer(content, composer, sink))

    for r in renderers:
        r.activate(feed)
    width = config.viewport.width if viewport_width is None else viewport_width
    feed.publish(ViewportSize(width=width, height=config.viewport.height))
    for r in renderers:
        r.teardown()

    rows = [
        PageRow(title=r.tree.title if r.tree else p.id, page_id=p.id, href=f"{p.id}.html")
        for p, r in zip(pages, renderers)
    ]
    nav_html = " ".join(link(n.href, n.label) for n in nav)
    body = "\n".join(
        [
            '<div class="stack header">',
            link("index.html", config.title.upper()),
            f"<nav>{nav_html}</nav>" if nav_html else "",
            "</div>",
            pages_index(rows),
        ]
    )
    (out_dir / "index.html").write_text(html_doc(title=config.title, body=body), encoding="utf-8")

    logger.info("Built %d pages into %s at %dpx", len(pages), out_dir, width)
    return {
        "pages": len(pages),
        "viewport_width": width,
        "out_dir": str(out_dir),
        "total_bytes": _dir_size_bytes(out_dir),
    }


def relative_href(href: str, page_id: str) -> str:
    """Rewrite a site-root-relative `href` for the page written at `<page_id>.html`.

    Absolute paths, fragments and URLs with a scheme or host are left alone.
    """
    parts = urlsplit(href)
    if parts.scheme or parts.netloc or href.startswith(("/", "#")) or not parts.path:
        return href
    page_dir = posixpath.dirname(page_id) or "."
    rel = posixpath.relpath(parts.path, page_dir)
    return href.replace(parts.path, rel, 1)


def _check_unique(pages: list[PageConfig]) -> None:
    seen: set[str] = set()
    for p in pages:
        if p.id in seen:
            raise ValueError(f"Page {p.id!r} is configured more than once")
        seen.add(p.id)


def _dir_size_bytes(path: Path) -> int:
    total = 0
    for p in path.rglob("*"):
        if p.is_file():
            total += p.stat().st_size
    return total
