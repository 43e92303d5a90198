"""Viewport-constrained page layout."""

from .compose import LayoutComposer, NavLink, column_width
from .tree import Container, ImageNode, LinkNode, Node, PageTree, TextBlock, walk

__all__ = [
    "LayoutComposer",
    "NavLink",
    "column_width",
    "PageTree",
    "Container",
    "TextBlock",
    "ImageNode",
    "LinkNode",
    "Node",
    "walk",
]
