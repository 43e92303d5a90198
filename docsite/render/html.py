"""HTML render sink for page trees."""

from __future__ import annotations

import logging
from html import escape
from pathlib import Path

import markdown

from ..config import MARKDOWN_EXTENSIONS
from ..layout.tree import Container, ImageNode, LinkNode, Node, PageTree, TextBlock
from .templates import h1, html_doc, link

logger = logging.getLogger(__name__)


def render_page(tree: PageTree, site_title: str | None = None) -> str:
    """Render a complete HTML document for `tree`."""
    title = f"{tree.title} · {site_title}" if site_title and site_title != tree.title else tree.title
    return html_doc(title=title, body=render_node(tree.root))


def render_node(node: Node) -> str:
    if isinstance(node, Container):
        role = f" {escape(node.role, quote=True)}" if node.role else ""
        inner = "\n".join(render_node(c) for c in node.children)
        return f'<div class="stack{role}" style="{_width_style(node.width)}">\n{inner}\n</div>'
    if isinstance(node, TextBlock):
        return _render_text(node)
    if isinstance(node, ImageNode):
        src = _safe_href(node.src) or ""
        return (
            f'<img src="{escape(src, quote=True)}" alt="" '
            f'width="{_px(node.width)}" height="{node.height}">'
        )
    if isinstance(node, LinkNode):
        href = _safe_href(node.href)
        if not href:
            return f'<span style="{_width_style(node.width)}">{escape(node.text)}</span>'
        return link(href, node.text, style=_width_style(node.width))
    raise TypeError(f"Unsupported node: {type(node).__name__}")


def _render_text(node: TextBlock) -> str:
    style = _width_style(node.width)
    if node.role == "title":
        return h1(node.text, style=style)
    if node.format == "markdown":
        return f'<div class="prose" style="{style}">\n{markdown_to_html(node.text)}\n</div>'
    return f'<div class="text" style="{style}">{escape(node.text)}</div>'


def markdown_to_html(md: str) -> str:
    # A fresh converter per call; markdown.Markdown instances carry state.
    return markdown.markdown(md, extensions=MARKDOWN_EXTENSIONS, output_format="html")


def _width_style(width: float) -> str:
    return f"width:{_px(width)}px;max-width:100%"


def _px(width: float) -> str:
    if float(width).is_integer():
        return str(int(width))
    return f"{width:.2f}".rstrip("0").rstrip(".")


def _safe_href(href: str | None) -> str | None:
    if href is None:
        return None
    cleaned = href.strip()
    if not cleaned:
        return None
    lowered = cleaned.lower()
    if lowered.startswith(("javascript:", "data:", "vbscript:")):
        return None
    return cleaned


class FileSink:
    """Sink that writes each rendered tree to `path`, replacing the previous one."""

    def __init__(self, path: Path, site_title: str | None = None):
        self.path = Path(path)
        self.site_title = site_title
        self.writes = 0

    def __call__(self, tree: PageTree) -> None:
        html = render_page(tree, site_title=self.site_title)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Replace atomically; the previous page stays intact until the rename.
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(html, encoding="utf-8")
        tmp.replace(self.path)
        self.writes += 1
        logger.debug("Wrote %s (%d bytes)", self.path, len(html))
