"""Path management utilities for hardhat-config library."""

from pathlib import Path
from typing import Dict, Optional, Union

from .constants import PATH_KEYS
from .types import PathSet


def get_default_project_root() -> Path:
    """
    Get default project root (current working directory).

    Returns:
        Absolute path of the current working directory
    """
    return Path.cwd()


def resolve_paths(
    paths: PathSet, project_root: Optional[Union[Path, str]] = None
) -> Dict[str, Path]:
    """
    Resolve a PathSet against a project root.

    Args:
        paths: Path overrides from the configuration
        project_root: Project directory (defaults to the current directory)

    Returns:
        Dictionary mapping artifacts/cache/sources/tests to absolute paths.
        Entries that are already absolute are kept as-is.
    """
    if project_root is None:
        project_root = get_default_project_root()
    else:
        project_root = Path(project_root).absolute()

    resolved: Dict[str, Path] = {}
    for key in PATH_KEYS:
        path = Path(getattr(paths, key))
        if not path.is_absolute():
            path = project_root / path
        resolved[key] = path

    return resolved
