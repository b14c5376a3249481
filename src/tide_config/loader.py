"""Line scanner that turns a .tide file into a ConfigStore."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from .context import ContextStack
from .exceptions import ConfigFileError
from .imports import parse_import_statement
from .imports import resolve_import
from .models import ConfigValue
from .models import TypeTag
from .store import ConfigStore
from .utils import strip_quotes
from .validation import validate

logger = logging.getLogger(__name__)


def load(path: str | os.PathLike[str], environ: Mapping[str, str] | None = None) -> ConfigStore:
    """Load a configuration file and everything it imports.

    Args:
        path: File to load
        environ: Environment consulted by the accessors (default: os.environ)

    Returns:
        Store holding every key defined by the file and its imports

    Raises:
        ConfigFileError: If a file cannot be read
        CircularImportError: If an import chain returns to a file being loaded
        ConfigValidationError: If a literal does not match its declared type
    """
    root = Path(path).resolve()
    data = load_file(root, {root})
    return ConfigStore(data, environ=environ)


def load_file(path: Path, visited: set[Path]) -> dict[str, ConfigValue]:
    """Scan one file, merging imports in as they are encountered.

    Args:
        path: File to scan
        visited: Canonical paths on the current import chain

    Returns:
        Mapping of dotted key to entry
    """
    lines = _read_lines(path)

    data: dict[str, ConfigValue] = {}
    context = ContextStack()

    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        import_target = parse_import_statement(line)
        if import_target is not None:
            data.update(resolve_import(path, import_target, visited, load_file))
            continue

        if line.endswith(" {"):
            context.push(line[:-2].rstrip())
            continue

        if line == "}":
            if context.pop() is None:
                logger.debug(f"{path}:{lineno}: unbalanced '}}' ignored")
            continue

        entry = _parse_assignment(line)
        if entry is None:
            logger.debug(f"{path}:{lineno}: skipping unrecognized line")
            continue

        field_name, value = entry
        key = context.qualify(field_name)
        validate(value, key=key)
        data[key] = value

    if len(context):
        logger.debug(f"{path}: {len(context)} block(s) left open at end of file: {'.'.join(context.segments)}")

    logger.info(f"Loaded {len(data)} keys from {path}")
    return data


def _read_lines(path: Path) -> list[str]:
    try:
        # Only "\n" ends a line; trailing "\r" is removed when the line is trimmed
        with open(path, encoding="utf-8", newline="") as f:
            return f.read().split("\n")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(f"Failed to read configuration from {path}: {e}", path=path) from e


def _parse_assignment(line: str) -> tuple[str, ConfigValue] | None:
    """Split ``name: type = literal`` into a field name and entry.

    Returns:
        (field_name, value) or None if the line is not an assignment
    """
    lhs, sep, rhs = line.partition("=")
    if not sep:
        return None

    field_name, sep, type_tag = lhs.partition(":")
    field_name = field_name.strip()
    if not sep or not field_name:
        return None

    type_tag = type_tag.strip()
    raw = rhs.strip()
    if type_tag == TypeTag.STRING.value:
        raw = strip_quotes(raw)

    return field_name, ConfigValue(raw=raw, type_tag=type_tag)
