"""Import directives: parsing, path resolution and cycle detection."""

import logging
from collections.abc import Callable
from pathlib import Path

from .exceptions import CircularImportError
from .models import TIDE_EXTENSION
from .models import ConfigValue

logger = logging.getLogger(__name__)

FileLoader = Callable[[Path, set[Path]], dict[str, ConfigValue]]


def parse_import_statement(line: str) -> str | None:
    """Extract the target of an ``import`` line.

    Args:
        line: Trimmed source line

    Returns:
        Import target with surrounding quotes stripped, or None if the line
        is not an import directive
    """
    parts = line.split()
    if len(parts) == 2 and parts[0] == "import":
        return parts[1].strip('"')
    return None


def normalize_import_target(target: str) -> str:
    """Map a dotted import name to a relative file path.

    Targets that already carry the extension are used as-is.

    Examples:
        >>> normalize_import_target("shared.logging")
        'shared/logging.tide'
        >>> normalize_import_target("common.tide")
        'common.tide'
    """
    if target.endswith(TIDE_EXTENSION):
        return target
    return target.replace(".", "/") + TIDE_EXTENSION


def resolve_import_path(base_path: Path, target: str) -> Path:
    """Resolve an import target relative to the importing file's directory.

    Empty path segments are dropped, so leading separators (from a leading
    dot or slash in the target) never make the path absolute.

    Examples:
        >>> resolve_import_path(Path("/conf/main.tide"), ".hidden")
        PosixPath('/conf/hidden.tide')
    """
    parts = [part for part in normalize_import_target(target).split("/") if part]
    return Path(base_path).parent.joinpath(*parts).resolve()


def resolve_import(
    base_path: Path,
    import_arg: str,
    visited: set[Path],
    load_file: FileLoader,
) -> dict[str, ConfigValue]:
    """Load the file named by an import directive.

    ``visited`` holds the files on the current import chain. The target is
    added for the duration of its own load and removed afterwards.

    Args:
        base_path: File containing the import line
        import_arg: Import target as written
        visited: Canonical paths currently being loaded
        load_file: Callable that scans one file, sharing ``visited``

    Returns:
        Entries defined by the imported file (and its own imports)

    Raises:
        CircularImportError: If the target is already on the import chain
    """
    full_path = resolve_import_path(base_path, import_arg)
    if full_path in visited:
        raise CircularImportError(full_path)

    logger.debug(f"Importing {full_path} from {base_path}")
    visited.add(full_path)
    try:
        return load_file(full_path, visited)
    finally:
        visited.discard(full_path)
