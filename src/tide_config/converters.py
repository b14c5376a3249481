"""Conversions from validated raw literals to Python values."""

import re

from .exceptions import ConversionError
from .models import INT32_MAX
from .models import INT32_MIN
from .models import INT64_MAX
from .models import INT64_MIN

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def is_integer_literal(value: str) -> bool:
    """Return True if value is a base-10 integer with an optional sign."""
    return _INTEGER_RE.fullmatch(value) is not None


def to_string(value: str) -> str:
    return value


def to_bool(value: str) -> bool:
    """Parse a boolean literal.

    Accepts ``1``, ``t``, ``T``, ``true``, ``True``, ``TRUE`` and their false
    counterparts ``0``, ``f``, ``F``, ``false``, ``False``, ``FALSE``.

    Raises:
        ConversionError: If value is not one of the accepted spellings
    """
    if value in TRUE_LITERALS:
        return True
    if value in FALSE_LITERALS:
        return False
    raise ConversionError(f"invalid bool value: {value!r}")


def to_int(value: str) -> int:
    if not is_integer_literal(value):
        raise ConversionError(f"invalid integer value: {value!r}")
    return int(value, 10)


def _to_bounded_int(value: str, low: int, high: int, bits: int) -> int:
    result = to_int(value)
    if not low <= result <= high:
        raise ConversionError(f"value {value} out of range for int{bits}")
    return result


def to_int32(value: str) -> int:
    return _to_bounded_int(value, INT32_MIN, INT32_MAX, 32)


def to_int64(value: str) -> int:
    return _to_bounded_int(value, INT64_MIN, INT64_MAX, 64)


def to_string_array(value: str) -> list[str]:
    """Split an array literal into trimmed string elements.

    One leading ``[`` and one trailing ``]`` are removed before splitting on
    ``,``. Quotes around individual elements are kept as written.

    Examples:
        >>> to_string_array("[auth, billing, search]")
        ['auth', 'billing', 'search']

        >>> to_string_array("[]")
        []
    """
    if value.startswith("["):
        value = value[1:]
    if value.endswith("]"):
        value = value[:-1]
    if not value.strip():
        return []
    return [item.strip() for item in value.split(",")]


def to_int_array(value: str) -> list[int]:
    """Split an array literal and parse every element as an integer.

    Raises:
        ConversionError: If any element is not an integer
    """
    result = []
    for item in to_string_array(value):
        if not is_integer_literal(item):
            raise ConversionError(f"array element is not an integer: {item!r}")
        result.append(int(item, 10))
    return result
