"""Content units and their storage."""

from .models import ContentUnit, Element, Image, Label, Link
from .source import ContentSource, MalformedContentError, NotFoundError

__all__ = [
    "ContentUnit",
    "Element",
    "Image",
    "Label",
    "Link",
    "ContentSource",
    "NotFoundError",
    "MalformedContentError",
]
