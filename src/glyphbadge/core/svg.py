"""Streaming SVG markup writer.

SvgWriter emits tags and attributes straight to an output sink without
building a document tree. Attribute values are written as given; callers
are responsible for passing markup-safe values.
"""

from typing import Any, Protocol

from glyphbadge.exceptions import OutputSinkError


class TextSink(Protocol):
    """Anything text can be written to, e.g. io.StringIO or an open file."""

    def write(self, text: str, /) -> Any: ...


class SvgWriter:
    """Minimal tag/attribute emitter.

    Example:
        svg = SvgWriter.start(out)
        svg.attr("width", 80).open("rect").attr("fill", "#fff").close_inline()
        svg.finish()
    """

    def __init__(self, out: TextSink, pretty: bool = False) -> None:
        self._out = out
        self._pretty = pretty
        self._open = False
        self._inline_text = False
        self._level = 0

    @classmethod
    def start(cls, out: TextSink, pretty: bool = False) -> "SvgWriter":
        """Create a writer and open the root svg tag."""
        writer = cls(out, pretty=pretty)
        writer.open("svg")
        return writer

    def open(self, name: str) -> "SvgWriter":
        """Start a new tag; attributes may follow."""
        self._end_if_open()
        self._write_indent()
        self._write(f"<{name}")
        self._open = True
        return self

    def close(self, name: str) -> "SvgWriter":
        """Close a tag that has children."""
        if self._inline_text:
            self._inline_text = False
            self._level -= 1
        else:
            self._end_if_open()
            if self._pretty:
                self._level -= 1
                self._write_indent()
        self._write(f"</{name}>")
        self._write_newline()
        return self

    def close_inline(self) -> "SvgWriter":
        """Close the currently open tag as an empty element."""
        if not self._open:
            raise RuntimeError("No open tag to close inline")
        self._open = False
        self._write("/>")
        self._write_newline()
        return self

    def attr(self, name: str, value: object) -> "SvgWriter":
        """Write an attribute on the currently open tag."""
        if not self._open:
            raise RuntimeError(f"Attribute '{name}' written outside of an open tag")
        self._write(f' {name}="{value}"')
        return self

    def text(self, content: str) -> "SvgWriter":
        """Write character data as the only child of the open tag."""
        if not self._open:
            raise RuntimeError("Text written outside of an open tag")
        self._write(">")
        self._open = False
        self._inline_text = True
        self._level += 1
        self._write(content)
        return self

    def finish(self) -> TextSink:
        """Close the root tag and return the sink."""
        self.close("svg")
        return self._out

    def _end_if_open(self) -> None:
        if self._open:
            self._write(">")
            self._open = False
            if self._pretty:
                self._level += 1
                self._write("\n")

    def _write_indent(self) -> None:
        if self._pretty and self._level > 0:
            self._write("\t" * self._level)

    def _write_newline(self) -> None:
        if self._pretty:
            self._write("\n")

    def _write(self, text: str) -> None:
        try:
            self._out.write(text)
        except (OSError, ValueError) as e:
            raise OutputSinkError(str(e)) from e
