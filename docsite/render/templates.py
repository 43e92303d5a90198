"""HTML fragments shared by page and index rendering."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from html import escape

from .styles import CSS


def html_doc(title: str, body: str) -> str:
    return (
        "<!doctype html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{escape(title)}</title>\n"
        f"<style>{CSS}</style>\n"
        "</head>\n"
        "<body>\n"
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )


def link(href: str, text: str, style: str | None = None) -> str:
    attr = f' style="{escape(style, quote=True)}"' if style else ""
    return f'<a href="{escape(href, quote=True)}"{attr}>{escape(text)}</a>'


def h1(text: str, style: str | None = None) -> str:
    attr = f' style="{escape(style, quote=True)}"' if style else ""
    return f"<h1{attr}>{escape(text)}</h1>"


def h2(text: str) -> str:
    return f"<h2>{escape(text)}</h2>"


@dataclass(frozen=True)
class PageRow:
    title: str
    page_id: str
    href: str


def pages_index(rows: Iterable[PageRow]) -> str:
    lines = [h2("PAGES"), "<ul>"]
    for r in rows:
        lines.append(
            "<li>"
            f"{link(r.href, r.title)}"
            f' <span class="muted">· {escape(r.page_id)}</span>'
            "</li>"
        )
    lines.append("</ul>")
    return "\n".join(lines)
