"""The "text" panel."""

from __future__ import annotations

from dataclasses import dataclass

from grafboard import timeseries as _timeseries
from grafboard.panel import Panel
from grafboard.timeseries import Option

__all__ = ["Text", "html", "markdown", "span", "height", "description", "transparent"]


@dataclass
class _TextSettings:
    mode: str = ""
    content: str = ""


class Text:
    """A text panel, rendering HTML or markdown content."""

    def __init__(self, title: str, *options: Option) -> None:
        self.builder = Panel(
            title=title,
            type="text",
            span=6.0,
            is_new=False,
            settings=_TextSettings(),
        )
        for opt in options:
            opt(self)

    @property
    def settings(self) -> _TextSettings:
        """The text specific part of the panel model."""
        return self.builder.settings


def _content(mode: str, content: str) -> Option:
    def apply(text: Text) -> None:
        text.settings.mode = mode
        text.settings.content = content

    return apply


def html(content: str) -> Option:
    """Set the content of the panel, rendered as HTML."""
    return _content("html", content)


def markdown(content: str) -> Option:
    """Set the content of the panel, rendered as markdown."""
    return _content("markdown", content)


def span(span: float) -> Option:
    """Set the width of the panel, in grid units (1 to 12)."""
    return _timeseries.span(span)


def height(height: str) -> Option:
    """Set the height of the panel, e.g. "400px"."""
    return _timeseries.height(height)


def description(content: str) -> Option:
    """Annotate the panel with a human-readable description."""
    return _timeseries.description(content)


def transparent() -> Option:
    """Make the panel background transparent."""
    return _timeseries.transparent()