"""Parsing of scalar wire text into typed values.

Mandatory fields must parse. Optional fields distinguish three outcomes:
empty text is absent, parseable text is present, and anything else fails
the whole response.
"""

import math
import re
from collections.abc import Callable
from typing import TypeVar

from octranspo_api.domain.errors import FieldParseError
from octranspo_api.domain.models.optional_scalar import OptionalScalar

T = TypeVar("T")

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_int(text: str, field: str) -> int:
    """Parse a base-10 integer, rejecting whitespace and digit separators."""
    if not _INT_RE.fullmatch(text):
        raise FieldParseError(field, text, "integer")
    return int(text)


def parse_float(text: str, field: str) -> float:
    """Parse a decimal floating point number."""
    if not _FLOAT_RE.fullmatch(text):
        raise FieldParseError(field, text, "float")
    value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        # Out of range for a double
        raise FieldParseError(field, text, "float")
    return value


def parse_bool(text: str, field: str) -> bool:
    """Parse a boolean in any of the spellings the feed has been seen to use."""
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise FieldParseError(field, text, "boolean")


def parse_optional(
    text: str, field: str, parser: Callable[[str, str], T]
) -> OptionalScalar[T]:
    """Wrap ``parser`` so that empty text yields an absent value.

    Raises:
        FieldParseError: If the text is non-empty and does not parse.
    """
    if text == "":
        return OptionalScalar.absent()
    return OptionalScalar.of(parser(text, field))


def optional_float(text: str, field: str) -> OptionalScalar[float]:
    return parse_optional(text, field, parse_float)


def optional_bool(text: str, field: str) -> OptionalScalar[bool]:
    return parse_optional(text, field, parse_bool)
