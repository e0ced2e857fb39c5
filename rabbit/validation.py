# ==============================================
# Validation Utilities
# ==============================================
#
# PURPOSE:
#   Small string helpers shared by interactive input and by
#   the data file loader, so that both apply exactly the same
#   rules to names and values.
#
# FUNCTIONS:
# ----------
# - trim_trailing_newline(text: str) -> str
#       Drop one trailing "\n" if present.
#
# - is_blank(text: str) -> bool
#       True for "" or whitespace-only text.
#
# - parse_strict_integer(text: str) -> int
#       Signed decimal numeral starting at the first character,
#       optionally followed by whitespace only. Raises ParseError.
#
# - truncate_name(text: str, width: int) -> str
#       Cut to at most `width` UTF-8 bytes on a character boundary.
#
# - validate_name(text: str, width: int) -> str
#       trim_trailing_newline + truncate_name + blank check.
#       Raises ValidationError.
#
# RULES:
# ------
#   "42"    → 42
#   "7 "    → 7       (trailing whitespace tolerated)
#   "-3\n"  → -3
#   " 7"    → error   (leading whitespace is NOT tolerated)
#   "42abc" → error
#   ""      → error
#
# ==============================================

import re

from rabbit.config import DEFAULT_NAME_WIDTH
from rabbit.errors import ParseError, ValidationError


INT_PATTERN = re.compile(r'[+-]?[0-9]+')

INT_MIN = -2**31
INT_MAX = 2**31 - 1

# ASCII only; str.isspace() also accepts \x1c-\x1f, \x85, \xa0, ...
WHITESPACE = " \t\n\v\f\r"


def trim_trailing_newline(text: str) -> str:
    if text.endswith("\n"):
        return text[:-1]
    return text


def is_blank(text: str) -> bool:
    return not text.strip(WHITESPACE)


def in_int_range(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def parse_strict_integer(text: str) -> int:
    """
    Parse a signed integer with no trailing garbage.

    Args:
        text: Raw text, e.g. a line read from the user or the value
            column of the data file

    Returns:
        The parsed integer

    Raises:
        ParseError: If the text does not start with a numeral, has
            anything other than whitespace after it, or does not fit
            a signed 32-bit integer
    """
    match = INT_PATTERN.match(text)
    if match is None:
        raise ParseError(text)

    rest = text[match.end():]
    if rest.strip(WHITESPACE):
        raise ParseError(text, "trailing characters after number")

    value = int(match.group())
    if not in_int_range(value):
        raise ParseError(text, "out of range")
    return value


def truncate_name(text: str, width: int = DEFAULT_NAME_WIDTH) -> str:
    encoded = text.encode("utf-8")
    if len(encoded) <= width:
        return text
    # Drop a partial multi-byte character left at the cut
    return encoded[:width].decode("utf-8", errors="ignore")


def validate_name(text: str, width: int = DEFAULT_NAME_WIDTH) -> str:
    """
    Normalize a raw item name.

    Args:
        text: Name as typed or as read from the data file
        width: Maximum name size in bytes

    Returns:
        The name without its trailing newline, truncated to `width`

    Raises:
        ValidationError: If the name is empty or whitespace-only
    """
    name = truncate_name(trim_trailing_newline(text), width)
    if is_blank(name):
        raise ValidationError("Name cannot be empty")
    return name
