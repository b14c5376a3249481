"""Loaded configuration and its typed accessors."""

import logging
import os
from collections.abc import Callable
from collections.abc import Iterator
from collections.abc import Mapping
from typing import Any
from typing import TypeVar

from . import converters
from .exceptions import ConfigError
from .exceptions import ConversionError
from .exceptions import KeyNotFoundError
from .exceptions import TypeMismatchError
from .models import ConfigValue
from .models import TypeTag
from .utils import deep_merge
from .utils import env_var_name
from .utils import nest_dotted

logger = logging.getLogger(__name__)

T = TypeVar("T")

ENV_ARRAY_TAG = "array[string]"


class ConfigStore:
    """Dotted-key configuration produced by a load.

    Every accessor checks the environment before the stored entry. The
    variable for ``database.port`` is ``DATABASE_PORT``. An override is read
    as a comma-separated array when the key name contains ``array`` or the
    stored entry is an array; otherwise it is a plain string. An array
    override is stored re-encoded, so with ``MYAPP_FEATURES=a,b`` the entry
    ``myApp.features`` reads as ``"[a, b]"`` through ``get_string`` and as
    ``["a", "b"]`` through ``get_array``.

    Args:
        data: Mapping of dotted key to entry
        environ: Environment to consult (default: the live os.environ)
    """

    def __init__(self, data: Mapping[str, ConfigValue] | None = None, environ: Mapping[str, str] | None = None):
        self._data: dict[str, ConfigValue] = dict(data or {})
        self._environ: Mapping[str, str] = os.environ if environ is None else environ

    # ===== Lookup =====

    def get_value(self, key: str) -> ConfigValue:
        """Resolve the effective entry for a key.

        Resolution order:
        1. Environment variable (array-encoded when the key is array-like)
        2. Stored entry

        Raises:
            KeyNotFoundError: If the key is in neither
        """
        env_value = self._environ.get(env_var_name(key))
        if env_value is not None:
            return self._from_environment(key, env_value)

        try:
            return self._data[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def raw_value(self, key: str) -> ConfigValue:
        """Stored entry for a key, ignoring the environment."""
        try:
            return self._data[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def _from_environment(self, key: str, env_value: str) -> ConfigValue:
        stored = self._data.get(key)
        if "array" in key or (stored is not None and stored.is_array):
            elements = [element.strip() for element in env_value.split(",")]
            value = ConfigValue(raw="[" + ", ".join(elements) + "]", type_tag=ENV_ARRAY_TAG)
        else:
            value = ConfigValue(raw=env_value, type_tag=TypeTag.STRING.value)
        logger.debug(f"Key '{key}' overridden by environment variable {env_var_name(key)}")
        return value

    # ===== Typed Accessors =====

    def get_string(self, key: str) -> str:
        return self._convert(key, "string", converters.to_string)

    def get_bool(self, key: str) -> bool:
        return self._convert(key, "bool", converters.to_bool)

    def get_int(self, key: str) -> int:
        return self._convert(key, "integer", converters.to_int)

    def get_int32(self, key: str) -> int:
        return self._convert(key, "int32", converters.to_int32)

    def get_int64(self, key: str) -> int:
        return self._convert(key, "int64", converters.to_int64)

    def get_array(self, key: str) -> list[str]:
        """Read a value as a list of strings.

        Scalars are split on commas like an unbracketed array literal, so a
        plain string override of ``a,b`` yields ``["a", "b"]``.
        """
        return self._convert(key, "array", converters.to_string_array)

    def get_int_array(self, key: str) -> list[int]:
        return self._convert(key, "array[integer]", converters.to_int_array)

    def _convert(self, key: str, expected: str, converter: Callable[[str], T]) -> T:
        value = self.get_value(key)
        try:
            return converter(value.raw)
        except ConversionError as e:
            raise TypeMismatchError(key, expected, value.type_tag) from e

    # ===== Introspection =====

    def keys(self) -> list[str]:
        return sorted(self._data)

    def to_dict(self, nested: bool = False) -> dict[str, Any]:
        """Stored raw values, without environment overrides.

        Args:
            nested: Rebuild the block structure instead of dotted keys

        Returns:
            ``{"a.b": raw}`` or, when nested, ``{"a": {"b": raw}}``

        Raises:
            ConfigError: If nested and a key is also the block prefix of
                another key (``a`` next to ``a.b``)
        """
        if not nested:
            return {key: self._data[key].raw for key in self.keys()}

        result: dict[str, Any] = {}
        for key in self.keys():
            parts = key.split(".")
            for end in range(1, len(parts)):
                prefix = ".".join(parts[:end])
                if prefix in self._data:
                    raise ConfigError(f"cannot nest key {key}: {prefix} is both a value and a block")
            result = deep_merge(result, nest_dotted(key, self._data[key].raw))
        return result

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ConfigStore({len(self._data)} keys)"
