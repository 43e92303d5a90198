"""Tests for viewport-constrained layout."""

from __future__ import annotations

import math
import unittest

from docsite.content.models import ContentUnit, Image, Label, Link
from docsite.layout.compose import (
    LayoutComposer,
    NavLink,
    column_width,
    scaled_height,
    strip_title_heading,
)
from docsite.layout.tree import Container, ImageNode, LinkNode, TextBlock, walk


def _flow() -> ContentUnit:
    return ContentUnit(
        id="examples/flow",
        title="Flow",
        elements=(
            Label(text="Pictures"),
            Image(src="yogi.jpg", width=200, height=200),
            Image(src="shells.jpg", width=472, height=315),
        ),
    )


def _tutorial() -> ContentUnit:
    return ContentUnit(id="guide/tasks", title="Tasks", markdown="# Tasks\n\nBody\n")


class TestColumnWidth(unittest.TestCase):
    def test_clamps_to_cap(self) -> None:
        for w in [0, 1, 149, 150, 151, 375, 600, 601, 1200, 4096]:
            self.assertEqual(column_width(600, w), min(600, w))
            self.assertEqual(column_width(150, w), min(150, w))

    def test_non_positive_width_is_zero(self) -> None:
        self.assertEqual(column_width(600, 0), 0)
        self.assertEqual(column_width(600, -20), 0)

    def test_non_finite_width_rejected(self) -> None:
        with self.assertRaises(ValueError):
            column_width(600, math.inf)
        with self.assertRaises(ValueError):
            column_width(600, math.nan)


class TestCompose(unittest.TestCase):
    def test_tutorial_page_at_phone_and_desktop_widths(self) -> None:
        composer = LayoutComposer(cap=600)
        self.assertEqual(composer.compose(_tutorial(), 375).column_width, 375)
        self.assertEqual(composer.compose(_tutorial(), 1200).column_width, 600)

    def test_markdown_becomes_single_text_block(self) -> None:
        tree = LayoutComposer(cap=600).compose(_tutorial(), 800)
        self.assertEqual(len(tree.column.children), 1)
        block = tree.column.children[0]
        self.assertIsInstance(block, TextBlock)
        self.assertEqual(block.format, "markdown")
        self.assertEqual(block.width, 600)

    def test_markdown_title_heading_not_repeated_in_body(self) -> None:
        tree = LayoutComposer(cap=600).compose(_tutorial(), 800)
        block = tree.column.children[0]
        self.assertEqual(tree.header.children[0].text, "Tasks")
        self.assertNotIn("# Tasks", block.text)
        self.assertEqual(block.text, "Body\n")

    def test_strip_title_heading_keeps_other_headings(self) -> None:
        md = "# Overview\n\nText\n"
        self.assertEqual(strip_title_heading(md, "Tasks"), md)
        self.assertEqual(strip_title_heading("## Sub\n\ntext", "Sub"), "## Sub\n\ntext")
        self.assertEqual(strip_title_heading("intro\n# Tasks\nmore\n", "Tasks"), "intro\nmore\n")

    def test_each_child_clamped_independently(self) -> None:
        tree = LayoutComposer(cap=150).compose(_flow(), 1024)
        children = tree.column.children
        self.assertEqual(tree.column_width, 150)
        self.assertEqual(tree.column.direction, "vertical")
        self.assertEqual(len(children), 3)
        self.assertIsInstance(children[0], TextBlock)
        self.assertEqual(children[0].text, "Pictures")
        self.assertEqual([type(c) for c in children[1:]], [ImageNode, ImageNode])
        self.assertEqual([c.src for c in children[1:]], ["yogi.jpg", "shells.jpg"])
        for child in children:
            self.assertEqual(child.width, 150)

    def test_images_keep_aspect_ratio(self) -> None:
        tree = LayoutComposer(cap=150).compose(_flow(), 1024)
        self.assertEqual(tree.column.children[1].height, 150)
        self.assertEqual(tree.column.children[2].height, round(315 * 150 / 472))

    def test_zero_width_image(self) -> None:
        self.assertEqual(scaled_height(Image(src="x", width=0, height=10), 150), 0)

    def test_zero_viewport_is_degenerate_but_defined(self) -> None:
        tree = LayoutComposer(cap=150).compose(_flow(), 0)
        self.assertEqual(tree.column_width, 0)
        self.assertTrue(all(c.width == 0 for c in tree.column.children))
        self.assertEqual(tree.column.children[1].height, 0)

    def test_links_become_link_nodes(self) -> None:
        unit = ContentUnit(id="l", elements=(Link(href="https://example.org", text="Docs"),))
        tree = LayoutComposer(cap=300).compose(unit, 200)
        node = tree.column.children[0]
        self.assertIsInstance(node, LinkNode)
        self.assertEqual(node.width, 200)

    def test_chrome_holds_title_and_nav(self) -> None:
        composer = LayoutComposer(cap=600, nav=[NavLink("Guide", "guide.html"), NavLink("Home", "index.html")])
        tree = composer.compose(_flow(), 480)
        header = tree.header
        self.assertIsInstance(header, Container)
        self.assertEqual(header.children[0], TextBlock(text="Flow", width=480, role="title"))
        self.assertEqual([c.text for c in header.children[1:]], ["Guide", "Home"])
        self.assertEqual(tree.root.width, 480)

    def test_title_falls_back_to_id(self) -> None:
        unit = ContentUnit(id="untitled", markdown="no heading")
        self.assertEqual(LayoutComposer().compose(unit, 500).title, "untitled")

    def test_deterministic(self) -> None:
        composer = LayoutComposer(cap=150)
        self.assertEqual(composer.compose(_flow(), 700), composer.compose(_flow(), 700))

    def test_round_trip_resize_reproduces_tree(self) -> None:
        composer = LayoutComposer(cap=600)
        first = composer.compose(_tutorial(), 375)
        composer.compose(_tutorial(), 1200)
        self.assertEqual(composer.compose(_tutorial(), 375), first)

    def test_no_node_wider_than_column(self) -> None:
        tree = LayoutComposer(cap=150).compose(_flow(), 900)
        for node in walk(tree.column):
            self.assertLessEqual(node.width, tree.column_width)

    def test_negative_cap_rejected(self) -> None:
        with self.assertRaises(ValueError):
            LayoutComposer(cap=-1)


if __name__ == "__main__":
    unittest.main()
