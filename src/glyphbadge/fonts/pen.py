"""Outline to path-data translation.

PathSink is a fontTools pen that turns glyph outline primitives into the
compact path mini-language used in badge documents:

- Commands are single letters: m, l, q, c, Z (relative) and M (absolute)
- Operands are deltas from the previous endpoint, with the Y axis negated
  to flip from font orientation (y up) to screen orientation (y down)
- Operands are scaled from font design units to output units and rounded
  to the configured precision; whole numbers are written as integers
- A space separates operands only where the next one is non-negative, as
  a leading '-' already separates numbers
"""

import math
import sys
from collections.abc import Mapping
from typing import Any

from fontTools.pens.basePen import BasePen

from glyphbadge.domain.geometry import Point

Coordinate = tuple[float, float]


def precision_modulus(precision: int) -> float:
    """Return the rounding modulus for a precision setting.

    Args:
        precision: 0 for integer-only output, otherwise a small positive int

    Returns:
        1.0 for precision 0, otherwise precision * 10
    """
    if precision == 0:
        return 1.0
    return precision * 10.0


def round_half_away(value: float) -> float:
    """Round to the nearest whole number, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def format_number(value: float, precision: int) -> str:
    """Round a value to the precision and format it as short as possible.

    Args:
        value: Value in output units
        precision: Precision setting (0 = integer only)

    Returns:
        Integer text for whole values, shortest round-trip decimal otherwise
    """
    modulus = precision_modulus(precision)
    rounded = round_half_away(value * modulus) / modulus
    truncated = int(rounded)
    if precision == 0 or abs(rounded - truncated) < sys.float_info.epsilon:
        return str(truncated)
    return repr(rounded)


class PathSink(BasePen):
    """A pen that writes compact path data into a caller-owned buffer.

    The buffer is a list of string fragments; callers join it when they
    need the path text. ``last`` tracks the previous endpoint in unscaled
    font design units. Closing a contour moves ``last`` back to the
    contour start, as "Z" does for the current point of an SVG path.

    Example:
        buffer = []
        sink = PathSink(scale=1.0, precision=0, buffer=buffer)
        glyph_set["A"].draw(sink)
        path = "".join(buffer)
    """

    def __init__(
        self,
        scale: float,
        precision: int,
        buffer: list[str],
        glyph_set: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(glyph_set)
        self.scale = scale
        self.precision = precision
        self.buffer = buffer
        self.last: Point[float] = Point(0.0, 0.0)
        self.contour_start: Point[float] = self.last
        self.has_outline = False

    def write(self, text: str) -> None:
        """Append raw text to the buffer."""
        self.buffer.append(text)

    def set_last(self, x: float, y: float) -> None:
        """Reset the point that following deltas are relative to."""
        self.last = Point(x, y)

    def move_to_abs(self, point: Point[float]) -> None:
        """Write an absolute move to a point already in output units."""
        self.write("M")
        self._write_number(point.x, first=True)
        self._write_number(point.y, first=False)

    def _write_number(self, value: float, first: bool) -> None:
        text = format_number(value, self.precision)
        if not first and not text.startswith("-"):
            self.write(" ")
        self.write(text)

    def _write_x(self, x: float, first: bool) -> None:
        self._write_number((x - self.last.x) * self.scale, first)

    def _write_y(self, y: float) -> None:
        self._write_number((self.last.y - y) * self.scale, first=False)

    def _write_points(self, command: str, *points: Coordinate) -> None:
        self.has_outline = True
        self.write(command)
        for index, (x, y) in enumerate(points):
            self._write_x(x, first=index == 0)
            self._write_y(y)
        x, y = points[-1]
        self.set_last(x, y)

    def _moveTo(self, pt: Coordinate) -> None:
        self._write_points("m", pt)
        self.contour_start = self.last

    def _lineTo(self, pt: Coordinate) -> None:
        self._write_points("l", pt)

    def _qCurveToOne(self, pt1: Coordinate, pt2: Coordinate) -> None:
        self._write_points("q", pt1, pt2)

    def _curveToOne(self, pt1: Coordinate, pt2: Coordinate, pt3: Coordinate) -> None:
        self._write_points("c", pt1, pt2, pt3)

    def _closePath(self) -> None:
        self.write("Z")
        # CFF contours close without a final lineTo back to the start
        self.last = self.contour_start

    def _endPath(self) -> None:
        pass
