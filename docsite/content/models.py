"""Content unit models."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Label(BaseModel):
    """A plain text label in an example document."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["label"] = "label"
    text: str


class Image(BaseModel):
    """An image with its natural size in pixels."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["image"] = "image"
    src: str
    width: int = Field(ge=0)
    height: int = Field(ge=0)


class Link(BaseModel):
    """A hyperlink in an example document."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["link"] = "link"
    href: str
    text: str


Element = Annotated[Label | Image | Link, Field(discriminator="kind")]


class ContentUnit(BaseModel):
    """A single page's subject matter prior to layout.

    Holds either markdown text (tutorial pages) or an ordered sequence of
    elements (example documents), never both.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    title: str | None = None
    markdown: str | None = None
    elements: tuple[Element, ...] = ()

    @model_validator(mode="after")
    def _one_body(self) -> ContentUnit:
        if self.markdown is not None and self.elements:
            raise ValueError("content holds both markdown and elements")
        if self.markdown is None and not self.elements:
            raise ValueError("content holds neither markdown nor elements")
        return self

    @property
    def is_sequence(self) -> bool:
        return self.markdown is None
