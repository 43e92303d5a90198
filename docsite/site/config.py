"""Site configuration model (site.json)."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from ..config import DEFAULT_COLUMN_CAP, DEFAULT_SITE_TITLE, DEFAULT_VIEWPORT_HEIGHT, DEFAULT_VIEWPORT_WIDTH


class ViewportSettings(BaseModel):
    """Viewport used when building the static site."""

    width: int = Field(default=DEFAULT_VIEWPORT_WIDTH, ge=0)
    height: int = Field(default=DEFAULT_VIEWPORT_HEIGHT, ge=0)


class NavItem(BaseModel):
    label: str
    href: str


class PageConfig(BaseModel):
    """A published page and its column cap."""

    id: str
    title: str | None = None
    cap: int = Field(default=DEFAULT_COLUMN_CAP, ge=0)


class SiteConfig(BaseModel):
    """Site-wide settings. Page ids and caps are data, not code."""

    title: str = DEFAULT_SITE_TITLE
    viewport: ViewportSettings = Field(default_factory=ViewportSettings)
    nav: list[NavItem] = Field(default_factory=list)
    pages: list[PageConfig] = Field(default_factory=list)


def load_site_config(path: Path) -> SiteConfig:
    """Read and validate a site.json file.

    Raises:
        ValueError: the file is not valid JSON or fails validation
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid site config {path}: {e.msg} at line {e.lineno}") from e

    try:
        return SiteConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid site config {path}: {e.error_count()} error(s)\n{e}") from e
