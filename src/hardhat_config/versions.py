"""Compiler version utilities for hardhat-config library."""

import re
from typing import Tuple

from .exceptions import MalformedConfigError

_SEMVER_PATTERN = re.compile(r"v?(\d+)\.(\d+)\.(\d+)")


def parse_version(version: str) -> Tuple[int, int, int]:
    """
    Parse a compiler version string into its numeric components.

    Accepted form: MAJOR.MINOR.PATCH, with an optional leading 'v'.

    Args:
        version: Version string, e.g. "0.8.17" or "v1.3.9"

    Returns:
        Tuple of (major, minor, patch)

    Raises:
        MalformedConfigError: If version is not a semantic version string
    """
    if not isinstance(version, str):
        raise MalformedConfigError(f"Compiler version must be a string, got {version!r}")

    match = _SEMVER_PATTERN.fullmatch(version)
    if match is None:
        raise MalformedConfigError(f"Invalid compiler version: {version!r}")

    major, minor, patch = (int(part) for part in match.groups())
    return (major, minor, patch)
