# Path helpers: user-supplied paths and directory creation
#
# Main features:
#   - expand_path(): `~` and environment variable expansion
#   - ensure_directory(): `mkdir -p`, failing loudly

import os
from pathlib import Path
from typing import Union

from ..errors import PreconditionError


def expand_path(value: Union[str, Path]) -> Path:
    """Expand `~` and `$VARS` without resolving symlinks."""
    return Path(os.path.expandvars(os.path.expanduser(str(value))))


def ensure_directory(path: Path) -> Path:
    """Create `path` and its parents if missing.

    Raises:
        PreconditionError: the directory could not be created, or the path
            exists and is not a directory
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PreconditionError(f"failed to create target directory '{path}': {e}") from e
    return path
