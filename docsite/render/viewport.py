"""In-process viewport-change notifications."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewportSize:
    width: int
    height: int


ViewportCallback = Callable[[ViewportSize], None]


class Subscription:
    """Handle returned by `ViewportFeed.subscribe`."""

    def __init__(self, feed: ViewportFeed, callback: ViewportCallback):
        self._feed = feed
        self._callback = callback
        self.active = True

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        self._feed._remove(self)


class ViewportFeed:
    """Delivers viewport sizes to subscribers synchronously, in arrival order.

    A size published from inside a callback is queued and delivered once the
    notification in progress has reached every subscriber.

    A subscriber error is fatal to the delivery in progress: the exception
    propagates out of `publish` and any sizes still queued are dropped, so a
    later publish never replays stale sizes.
    """

    def __init__(self, initial: ViewportSize | None = None):
        self.current = initial
        self._subscriptions: list[Subscription] = []
        self._pending: deque[ViewportSize] = deque()
        self._delivering = False

    def subscribe(self, callback: ViewportCallback) -> Subscription:
        sub = Subscription(self, callback)
        self._subscriptions.append(sub)
        return sub

    def publish(self, size: ViewportSize) -> None:
        self._pending.append(size)
        if self._delivering:
            return

        self._delivering = True
        try:
            while self._pending:
                size = self._pending.popleft()
                self.current = size
                logger.debug("Viewport %dx%d", size.width, size.height)
                for sub in list(self._subscriptions):
                    if sub.active:
                        sub._callback(size)
        finally:
            self._delivering = False
            self._pending.clear()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def _remove(self, sub: Subscription) -> None:
        if sub in self._subscriptions:
            self._subscriptions.remove(sub)
