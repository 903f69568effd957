"""Text panels, rendered as HTML or markdown."""

from __future__ import annotations

from collections.abc import Callable

from grafboard.panel import Panel

TextOption = Callable[["Text"], None]


class Text(Panel):
    """A panel displaying static HTML or markdown content."""

    type = "text"

    def __init__(self, title: str, *args: TextOption) -> None:
        super().__init__(title)
        self.mode = ""
        self.content = ""
        self._apply(args)


def html(content: str) -> TextOption:
    """Set the content of the panel, rendered as HTML."""

    def apply(text: Text) -> None:
        text.mode = "html"
        text.content = content

    return apply


def markdown(content: str) -> TextOption:
    """Set the content of the panel, rendered as markdown."""

    def apply(text: Text) -> None:
        text.mode = "markdown"
        text.content = content

    return apply