"""Data models for tide-config."""

from dataclasses import dataclass
from enum import Enum

TIDE_EXTENSION = ".tide"

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class TypeTag(str, Enum):
    """Type tags recognized on the left-hand side of an assignment.

    Array tags may carry an element type (``array[integer]``); bare ``array``
    holds strings.
    """

    STRING = "string"
    INTEGER = "integer"
    BOOL = "bool"
    ARRAY = "array"


@dataclass(frozen=True)
class ConfigValue:
    """A stored literal and the type it was declared with.

    Conversion to a Python value is deferred to the accessors, so the same
    entry can be read as different types.

    Attributes:
        raw: Literal text after ``=``, trimmed (one layer of quotes removed
            for ``string`` values)
        type_tag: Declared type, e.g. ``integer`` or ``array[string]``
    """

    raw: str
    type_tag: str

    @property
    def is_array(self) -> bool:
        tag = self.type_tag
        return tag == TypeTag.ARRAY.value or (tag.startswith(TypeTag.ARRAY.value + "[") and tag.endswith("]"))

    @property
    def element_type(self) -> str | None:
        """Element type of an array value, or None for scalars."""
        if not self.is_array:
            return None
        if self.type_tag == TypeTag.ARRAY.value:
            return TypeTag.STRING.value
        return self.type_tag[len(TypeTag.ARRAY.value) + 1 : -1].strip()
