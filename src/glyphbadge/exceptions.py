"""Exception hierarchy for glyphbadge."""


class GlyphBadgeError(Exception):
    """Base exception for all glyphbadge errors."""

    pass


class InvalidCharacterError(GlyphBadgeError):
    """Badge text contains a character that would break the markup."""

    def __init__(self, text: str, character: str) -> None:
        self.text = text
        self.character = character
        super().__init__(f"Invalid character {character!r} in badge text {text!r}")


class UnrecognizedStyleError(GlyphBadgeError, ValueError):
    """Style name is not one of the known presets."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unrecognized style '{name}'")


class UnrecognizedColorError(GlyphBadgeError, ValueError):
    """Color is neither a named color nor a 3/6 digit hex string."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unrecognized color '{value}'")


class UnrecognizedOpacityError(GlyphBadgeError, ValueError):
    """Opacity is not a decimal in [0, 1] with at most two fractional digits."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unrecognized opacity '{value}'")


class FontError(GlyphBadgeError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontFormatError(FontError):
    """Font is missing tables required for badge rendering."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid font format '{path}': {details}")


class OutputSinkError(GlyphBadgeError):
    """The output sink rejected a write; partial output is unusable."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to write badge output: {reason}")
