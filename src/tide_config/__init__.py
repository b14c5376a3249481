"""tide-config: reader for the TIDE hierarchical configuration format.

A TIDE file is a line-oriented list of typed assignments grouped in named
blocks. Blocks turn into dotted keys, files can import other files, and
environment variables shadow file values whenever a key is read.

Public API:
    load: Load a .tide file (and its imports) into a ConfigStore
    ConfigStore: Loaded keys plus typed accessors with environment overrides
    ConfigValue: Raw literal and declared type of one entry
    ConfigError and subclasses: Exception types

Example:
    ```python
    from tide_config import load

    config = load("app.tide")

    port = config.get_int("database.port")      # DATABASE_PORT wins if set
    features = config.get_array("myApp.features")
    ```
"""

from .exceptions import CircularImportError
from .exceptions import ConfigError
from .exceptions import ConfigFileError
from .exceptions import ConfigValidationError
from .exceptions import ConversionError
from .exceptions import KeyNotFoundError
from .exceptions import TypeMismatchError
from .exceptions import UnsupportedTypeError
from .loader import load
from .models import TIDE_EXTENSION
from .models import ConfigValue
from .models import TypeTag
from .store import ConfigStore

__version__ = "0.1.0"

__all__ = [
    "load",
    "ConfigStore",
    "ConfigValue",
    "TypeTag",
    "TIDE_EXTENSION",
    "ConfigError",
    "ConfigFileError",
    "CircularImportError",
    "ConfigValidationError",
    "UnsupportedTypeError",
    "ConversionError",
    "TypeMismatchError",
    "KeyNotFoundError",
]
