"""Viewport-driven page rendering."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from ..content.models import ContentUnit
from ..content.source import ContentSource
from ..layout.compose import LayoutComposer
from ..layout.tree import PageTree
from .viewport import Subscription, ViewportFeed, ViewportSize

logger = logging.getLogger(__name__)

Sink = Callable[[PageTree], None]


class RendererState(str, Enum):
    IDLE = "idle"
    SUBSCRIBED = "subscribed"


class PageRenderer:
    """Keeps one page laid out for the current viewport.

    While subscribed, every distinct viewport size recomposes the page and
    replaces the displayed tree in one assignment before handing it to the
    sink. After `teardown` no further recompositions happen.
    """

    def __init__(self, content: ContentUnit, composer: LayoutComposer, sink: Sink | None = None):
        self.content = content
        self.composer = composer
        self.sink = sink
        self.state = RendererState.IDLE
        self._tree: PageTree | None = None
        self._last_size: ViewportSize | None = None
        self._subscription: Subscription | None = None
        self.render_count = 0

    @classmethod
    def for_page(
        cls,
        source: ContentSource,
        page_id: str,
        composer: LayoutComposer,
        sink: Sink | None = None,
    ) -> PageRenderer:
        """Load `page_id` and build a renderer for it.

        Load errors propagate here, before any subscription exists.
        """
        return cls(source.load(page_id), composer, sink)

    @property
    def tree(self) -> PageTree | None:
        """The currently displayed page tree."""
        return self._tree

    def activate(self, feed: ViewportFeed) -> None:
        if self.state is RendererState.SUBSCRIBED:
            raise RuntimeError(f"Renderer for {self.content.id!r} is already active")

        self._subscription = feed.subscribe(self._on_viewport)
        self.state = RendererState.SUBSCRIBED
        logger.debug("Activated renderer for %s", self.content.id)

        if feed.current is not None:
            self._on_viewport(feed.current)

    def teardown(self) -> None:
        if self.state is RendererState.IDLE:
            return
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None
        self.state = RendererState.IDLE
        self._last_size = None
        logger.debug("Tore down renderer for %s", self.content.id)

    def _on_viewport(self, size: ViewportSize) -> None:
        if self.state is not RendererState.SUBSCRIBED:
            return
        if size == self._last_size:
            return

        tree = self.composer.compose(self.content, size.width)
        self._tree = tree
        self._last_size = size
        self.render_count += 1
        logger.debug(
            "Rendered %s at %dpx (column %spx)", self.content.id, size.width, tree.column_width
        )
        if self.sink is not None:
            self.sink(tree)
