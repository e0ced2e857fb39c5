# ==============================================
# Record (Data Class)
# ==============================================
#
# PURPOSE:
#   A single stored item: a name paired with an integer value.
#   Used by the store (in-memory collection), by persistence
#   (one record per line of the data file) and by the CLI.
#
# CLASSES:
# --------
# - Record (frozen dataclass)
#
#     Attributes:
#     -----------
#     - name: str     → 1..name_width bytes, never blank
#     - value: int    → signed 32-bit integer
#
#     Construction raises ValidationError for a blank name or an
#     out-of-range value; the byte width is enforced by the store.
#
#     Methods:
#     --------
#     - to_line() -> str                        → "name,value"
#     - from_line(line, width) -> Record        (classmethod) → Parse one line
#
# LINE FORMAT:
# ------------
#   <name>,<value>
#   Split at the FIRST comma. No quoting, no escaping.
#
# ==============================================

from dataclasses import dataclass

from rabbit.config import DEFAULT_NAME_WIDTH
from rabbit.errors import ValidationError
from rabbit.validation import (
    in_int_range,
    is_blank,
    trim_trailing_newline,
    parse_strict_integer,
    validate_name,
)


SEPARATOR = ","


@dataclass(frozen=True)
class Record:
    """A named integer item."""

    name: str
    value: int

    def __post_init__(self):
        if is_blank(self.name):
            raise ValidationError("Name cannot be empty")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(f"Value must be an integer, got {self.value!r}")
        if not in_int_range(self.value):
            raise ValidationError(f"Value {self.value} does not fit a 32-bit integer")

    def to_line(self) -> str:
        """
        Serialize the record for the data file.

        Returns:
            "name,value" without a line terminator
        """
        return f"{self.name}{SEPARATOR}{self.value}"

    @classmethod
    def from_line(cls, line: str, width: int = DEFAULT_NAME_WIDTH) -> "Record":
        """
        Reconstruct a Record from one line of the data file.

        Args:
            line: Raw line, with or without its trailing newline
            width: Maximum name size in bytes; longer names are truncated

        Returns:
            A Record instance

        Raises:
            ValidationError: No separator or a blank name
            ParseError: The value column is not a strict integer
        """
        line = trim_trailing_newline(line)
        name, sep, value_text = line.partition(SEPARATOR)
        if not sep:
            raise ValidationError(f"Missing '{SEPARATOR}' separator")

        return cls(
            name=validate_name(name, width),
            value=parse_strict_integer(value_text),
        )
