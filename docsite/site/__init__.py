"""Static site generation."""

from .build import build_site
from .config import NavItem, PageConfig, SiteConfig, ViewportSettings, load_site_config

__all__ = [
    "build_site",
    "SiteConfig",
    "PageConfig",
    "NavItem",
    "ViewportSettings",
    "load_site_config",
]
