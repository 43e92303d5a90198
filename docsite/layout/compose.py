"""Lay a content unit out into a page tree for a given viewport width."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from ..config import DEFAULT_COLUMN_CAP
from ..content.models import ContentUnit, Element, Image, Label, Link
from .tree import Container, ImageNode, LinkNode, Node, PageTree, TextBlock


@dataclass(frozen=True)
class NavLink:
    label: str
    href: str


def column_width(cap: float, viewport_width: float) -> float:
    """Width available to content: the viewport, clamped to `cap`.

    Widths at or below zero give a zero-width column.
    """
    if not math.isfinite(viewport_width):
        raise ValueError(f"viewport width must be finite, got {viewport_width!r}")
    return min(cap, max(viewport_width, 0))


class LayoutComposer:
    """Pure layout function bound to one page's cap and chrome.

    Holds no state between calls: `compose` depends only on its arguments and
    the values given at construction.
    """

    def __init__(
        self,
        cap: float = DEFAULT_COLUMN_CAP,
        nav: Sequence[NavLink] = (),
    ):
        if not math.isfinite(cap) or cap < 0:
            raise ValueError(f"cap must be a finite non-negative number, got {cap!r}")
        self.cap = cap
        self.nav = tuple(nav)

    def compose(self, content: ContentUnit, viewport_width: float) -> PageTree:
        width = column_width(self.cap, viewport_width)
        title = content.title or content.id

        header = Container(
            width=width,
            role="header",
            children=(
                TextBlock(text=title, width=width, role="title"),
                *(LinkNode(href=n.href, text=n.label, width=width) for n in self.nav),
            ),
        )

        if content.is_sequence:
            # Each child gets the column constraint on its own, not a share of it.
            body: tuple[Node, ...] = tuple(_element_node(e, width) for e in content.elements)
        else:
            text = strip_title_heading(content.markdown or "", title)
            body = (TextBlock(text=text, width=width, format="markdown"),)

        column = Container(width=width, role="content", children=body)
        root = Container(width=max(viewport_width, 0), role="page", children=(header, column))
        return PageTree(
            title=title,
            viewport_width=max(viewport_width, 0),
            column_width=width,
            root=root,
        )


def _element_node(element: Element, width: float) -> Node:
    if isinstance(element, Label):
        return TextBlock(text=element.text, width=width)
    if isinstance(element, Image):
        return ImageNode(src=element.src, width=width, height=scaled_height(element, width))
    if isinstance(element, Link):
        return LinkNode(href=element.href, text=element.text, width=width)
    raise TypeError(f"Unsupported element: {type(element).__name__}")


def strip_title_heading(md: str, title: str) -> str:
    """Drop the first level-one heading when it repeats `title`.

    The header chrome already shows the title.
    """
    lines = md.splitlines(keepends=True)
    for i, line in enumerate(lines):
        stripped = line.strip()
        if stripped.startswith("# "):
            if stripped[2:].strip() != title:
                return md
            return "".join(lines[:i] + lines[i + 1 :]).lstrip("\n")
    return md


def scaled_height(image: Image, width: float) -> int:
    """Height of `image` drawn at `width`, keeping its aspect ratio."""
    if image.width == 0:
        return 0
    return round(image.height * width / image.width)
