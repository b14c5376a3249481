"""Exceptions for tide-config."""

from pathlib import Path


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigFileError(ConfigError):
    """Error reading a configuration file."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class CircularImportError(ConfigFileError):
    """A file was imported again while it was still being loaded."""

    def __init__(self, path: Path):
        super().__init__(f"circular import detected: {path}", path=path)


class ConfigValidationError(ConfigError):
    """A literal does not match its declared type."""

    def __init__(self, message: str, key: str | None = None):
        if key is not None:
            message = f"validation error for key {key}: {message}"
        super().__init__(message)
        self.key = key


class UnsupportedTypeError(ConfigValidationError):
    """A type tag (or array element type) is not one the format knows."""

    def __init__(self, type_tag: str, key: str | None = None, element: bool = False):
        kind = "array element type" if element else "type"
        super().__init__(f"unsupported {kind}: {type_tag}", key=key)
        self.type_tag = type_tag


class ConversionError(ConfigError):
    """A raw value could not be converted to the requested Python type."""

    pass


class TypeMismatchError(ConversionError):
    """An accessor was used on a value that cannot produce its type."""

    def __init__(self, key: str, expected: str, actual: str):
        super().__init__(f"type mismatch for key {key}: expected {expected}, got {actual}")
        self.key = key
        self.expected = expected
        self.actual = actual


class KeyNotFoundError(ConfigError):
    """Key is neither set in the environment nor present in the store."""

    def __init__(self, key: str):
        super().__init__(f"key not found: {key}")
        self.key = key
