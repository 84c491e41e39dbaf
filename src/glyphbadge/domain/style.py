"""Badge visual styles.

Two presets exist: "classic" (rounded corners and a top-down highlight
gradient) and "flat" (square corners, no gradient). Any other look is
produced by overriding fields of a preset.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any

from glyphbadge.domain.color import BLUE, Color, Gradient, Opacity
from glyphbadge.exceptions import UnrecognizedStyleError

# Shadow opacity used with the width-table backend, which draws real text
# elements instead of outline paths.
APPROXIMATE_SHADOW_OPACITY = Opacity(".3")


@dataclass(frozen=True, slots=True)
class Style:
    """Immutable badge styling.

    Attributes:
        height: Badge height in pixels
        border_radius: Corner radius in pixels (0 = square corners)
        background: Status rectangle background color
        text_color: Text fill color
        text_shadow_color: Drop shadow fill color
        text_shadow_opacity: Drop shadow opacity
        text_shadow_offset: Drop shadow offset in pixels (both axes)
        label_background: Label rectangle color (None leaves it unfilled)
        label_text_color: Label text color override (None uses text_color)
        gradient: Optional overlay gradient
    """

    height: int
    border_radius: int
    background: Color
    text_color: Color
    text_shadow_color: Color
    text_shadow_opacity: Opacity
    text_shadow_offset: int
    label_background: Color | None = None
    label_text_color: Color | None = None
    gradient: Gradient | None = None

    @classmethod
    def classic(cls, approximate: bool = False) -> "Style":
        """Rounded corners, highlight gradient and a .25 shadow."""
        return cls(
            height=20,
            border_radius=3,
            background=BLUE,
            text_color=Color.custom("fff"),
            text_shadow_color=Color.custom("000"),
            text_shadow_opacity=(
                APPROXIMATE_SHADOW_OPACITY if approximate else Opacity(".25")
            ),
            text_shadow_offset=1,
            label_background=Color.custom("555"),
            label_text_color=None,
            gradient=Gradient(
                start=Color.custom("eee"),
                end=None,
                opacity=Opacity(".1"),
            ),
        )

    @classmethod
    def flat(cls, approximate: bool = False) -> "Style":
        """Square corners, no gradient and a .1 shadow."""
        return dataclasses.replace(
            cls.classic(),
            gradient=None,
            border_radius=0,
            text_shadow_opacity=(
                APPROXIMATE_SHADOW_OPACITY if approximate else Opacity(".1")
            ),
        )

    @classmethod
    def from_name(cls, name: str, approximate: bool = False) -> "Style":
        """Look up a preset by name.

        Args:
            name: "classic" or "flat" (case-insensitive)
            approximate: Use the shadow defaults of the width-table backend

        Raises:
            UnrecognizedStyleError: For any other name
        """
        presets = {
            "classic": cls.classic,
            "flat": cls.flat,
        }
        try:
            preset = presets[name.lower()]
        except KeyError:
            raise UnrecognizedStyleError(name) from None
        return preset(approximate=approximate)

    def with_overrides(self, **changes: Any) -> "Style":
        """Return a copy with the given fields replaced.

        None values are ignored so optional CLI options can be passed through.
        """
        return dataclasses.replace(
            self, **{key: value for key, value in changes.items() if value is not None}
        )

    @property
    def requires_mask(self) -> bool:
        """Whether the rectangles must be wrapped in a masked group."""
        return self.border_radius > 0 or self.gradient is not None
