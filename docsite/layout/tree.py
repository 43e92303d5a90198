"""Page tree nodes produced by the layout composer.

Nodes are immutable and compare structurally, so two compositions of the same
input are equal even though they share no identity.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Literal, Union


@dataclass(frozen=True)
class TextBlock:
    text: str
    width: float
    format: Literal["plain", "markdown"] = "plain"
    role: str | None = None


@dataclass(frozen=True)
class ImageNode:
    src: str
    width: float
    height: int


@dataclass(frozen=True)
class LinkNode:
    href: str
    text: str
    width: float


@dataclass(frozen=True)
class Container:
    """A stack of child nodes. Only vertical stacking is needed so far."""

    width: float
    children: tuple[Node, ...] = ()
    direction: Literal["vertical"] = "vertical"
    role: str | None = None


Node = Union[Container, TextBlock, ImageNode, LinkNode]


@dataclass(frozen=True)
class PageTree:
    """A fully laid out page at one viewport width."""

    title: str
    viewport_width: float
    column_width: float
    root: Container = field(repr=False)

    @property
    def header(self) -> Container:
        return self.root.children[0]  # type: ignore[return-value]

    @property
    def column(self) -> Container:
        return self.root.children[1]  # type: ignore[return-value]


def walk(node: Node) -> Iterator[Node]:
    """Yield `node` and its descendants depth-first, in document order."""
    yield node
    if isinstance(node, Container):
        for child in node.children:
            yield from walk(child)
