"""EditorConfig and ParseMode for edit engine configuration.

EditorConfig is a frozen (immutable) dataclass holding the serialization and
parsing parameters.  ParseMode selects what happens when the edited text is
not valid JSON: lenient (keep it as a string value) or strict (reject).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class ParseMode(StrEnum):
    """How edited text that is not valid JSON is treated on save.

    - LENIENT: The raw text becomes a JSON string value, so a bare word
               typed without quotes is saved as a string.
    - STRICT:  The save is rejected with InvalidEditError.
    """

    LENIENT = auto()
    STRICT = auto()


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Immutable configuration for normalization, parsing and serialization.

    Attributes:
        parse_mode: Treatment of edited text that is not valid JSON.
        indent: Spaces per indentation level in canonical and committed
            text (>= 0).  Default 2.
        ensure_ascii: When True, non-ASCII characters are written as
            ``\\uXXXX`` escapes.  Default False.
    """

    parse_mode: ParseMode = ParseMode.LENIENT
    indent: int = 2
    ensure_ascii: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            msg = f"indent must be an int, got {type(self.indent)!r}"
            raise ValueError(msg)
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if not isinstance(self.parse_mode, ParseMode):
            try:
                object.__setattr__(self, "parse_mode", ParseMode(self.parse_mode))
            except ValueError:
                choices = [m.value for m in ParseMode]
                msg = f"parse_mode must be one of {choices}, got {self.parse_mode!r}"
                raise ValueError(msg) from None
