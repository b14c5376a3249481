"""Load-time validation of literals against their declared type."""

from .converters import is_integer_literal
from .converters import to_bool
from .converters import to_int_array
from .converters import to_string_array
from .exceptions import ConfigValidationError
from .exceptions import ConversionError
from .exceptions import UnsupportedTypeError
from .models import ConfigValue
from .models import TypeTag


def validate(value: ConfigValue, key: str | None = None) -> None:
    """Check that a raw literal is well-formed for its declared type.

    Args:
        value: Entry to check
        key: Dotted key the entry is stored under, used in error messages

    Raises:
        UnsupportedTypeError: If the type tag or array element type is unknown
        ConfigValidationError: If the literal does not match the type
    """
    tag = value.type_tag

    if tag == TypeTag.STRING.value:
        return

    if tag == TypeTag.INTEGER.value:
        if not is_integer_literal(value.raw):
            raise ConfigValidationError(f"invalid integer value: {value.raw!r}", key=key)
        return

    if tag == TypeTag.BOOL.value:
        try:
            to_bool(value.raw)
        except ConversionError as e:
            raise ConfigValidationError(str(e), key=key) from e
        return

    if value.is_array:
        _validate_array(value, key)
        return

    raise UnsupportedTypeError(tag, key=key)


def _validate_array(value: ConfigValue, key: str | None) -> None:
    element_type = value.element_type
    if element_type not in (TypeTag.STRING.value, TypeTag.INTEGER.value):
        raise UnsupportedTypeError(element_type or "", key=key, element=True)

    raw = value.raw
    if not (raw.startswith("[") and raw.endswith("]")):
        raise ConfigValidationError(f"invalid array format: {raw!r}", key=key)

    if element_type == TypeTag.STRING.value:
        # Integer-looking elements are not allowed under array[string]
        for element in to_string_array(raw):
            if is_integer_literal(element):
                raise ConfigValidationError(
                    f"invalid array element type: expected string, got integer ({element})", key=key
                )
        return

    try:
        to_int_array(raw)
    except ConversionError as e:
        raise ConfigValidationError(f"invalid array format: {e}", key=key) from e
