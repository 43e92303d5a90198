"""Rendering: viewport feed, page renderer and HTML sink."""

from .html import FileSink, render_page
from .renderer import PageRenderer, RendererState
from .viewport import Subscription, ViewportFeed, ViewportSize

__all__ = [
    "FileSink",
    "render_page",
    "PageRenderer",
    "RendererState",
    "Subscription",
    "ViewportFeed",
    "ViewportSize",
]
