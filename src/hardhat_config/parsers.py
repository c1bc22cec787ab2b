"""Configuration section parsers for hardhat-config library."""

import re
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

from .constants import PATH_KEYS, URL_SCHEMES
from .exceptions import MalformedConfigError
from .types import CompilerProfile, CompilerSource, NetworkProfile, OptimizerSettings, PathSet
from .versions import parse_version

_PRIVATE_KEY_PATTERN = re.compile(r"(0x)?[0-9a-fA-F]{64}")


def is_valid_url(url: Any) -> bool:
    """
    Check whether a value is a usable network endpoint URL.

    Args:
        url: Candidate URL

    Returns:
        True if url is a string with an http(s)/ws(s) scheme and a host
    """
    if not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url)
        # Accessing port validates it
        parsed.port
    except ValueError:
        return False
    return parsed.scheme in URL_SCHEMES and bool(parsed.hostname)


def is_valid_private_key(key: Any) -> bool:
    """Check whether a value is a 32-byte hex private key (0x prefix optional)."""
    return isinstance(key, str) and _PRIVATE_KEY_PATTERN.fullmatch(key) is not None


def _require_mapping(data: Any, context: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise MalformedConfigError(f"{context} must be a mapping, got {type(data).__name__}")
    return data


def _optional_int(
    data: Mapping[str, Any], key: str, context: str, minimum: int = 0
) -> Optional[int]:
    """Read an optional integer field, rejecting booleans and values below minimum."""
    if key not in data or data[key] is None:
        return None

    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedConfigError(f"{context}.{key} must be an integer, got {value!r}")
    if value < minimum:
        raise MalformedConfigError(f"{context}.{key} must be >= {minimum}, got {value}")
    return value


def parse_network(name: str, data: Mapping[str, Any]) -> NetworkProfile:
    """
    Parse one entry of the ``networks`` section.

    Args:
        name: Network name (mapping key)
        data: Network entry with 'url', optional 'accounts', 'gasPrice', 'chainId'

    Returns:
        NetworkProfile

    Raises:
        MalformedConfigError: If url is missing or unparseable, an account is
            not a private key, or a numeric field is invalid
    """
    context = f"networks.{name}"
    data = _require_mapping(data, context)

    if "url" not in data:
        raise MalformedConfigError(f"{context} is missing required field 'url'")
    url = data["url"]
    if not is_valid_url(url):
        raise MalformedConfigError(f"{context}.url is not a valid URL: {url!r}")

    accounts = data.get("accounts", [])
    if not isinstance(accounts, (list, tuple)):
        raise MalformedConfigError(f"{context}.accounts must be a list of private keys")
    for index, key in enumerate(accounts):
        if not is_valid_private_key(key):
            # Never echo the key itself
            raise MalformedConfigError(
                f"{context}.accounts[{index}] is not a well-formed private key"
            )

    return NetworkProfile(
        name=name,
        url=url,
        accounts=tuple(accounts),
        gas_price=_optional_int(data, "gasPrice", context),
        chain_id=_optional_int(data, "chainId", context, minimum=1),
    )


def parse_compiler(section: str, data: Mapping[str, Any]) -> CompilerProfile:
    """
    Parse a compiler section (``zksolc`` or ``solidity``).

    Args:
        section: Section name, used in error messages
        data: Section with 'version', optional 'compilerSource' and
              'settings.optimizer.{enabled,runs}'

    Returns:
        CompilerProfile

    Raises:
        MalformedConfigError: If version is missing or invalid, or a setting
            has the wrong type
    """
    data = _require_mapping(data, section)

    if "version" not in data:
        raise MalformedConfigError(f"{section} is missing required field 'version'")
    version = data["version"]
    parse_version(version)

    compiler_source = None
    if data.get("compilerSource") is not None:
        try:
            compiler_source = CompilerSource(data["compilerSource"])
        except ValueError:
            allowed = ", ".join(s.value for s in CompilerSource)
            raise MalformedConfigError(
                f"{section}.compilerSource must be one of {allowed}, "
                f"got {data['compilerSource']!r}"
            ) from None

    settings = _require_mapping(data.get("settings", {}), f"{section}.settings")
    optimizer_data = _require_mapping(
        settings.get("optimizer", {}), f"{section}.settings.optimizer"
    )

    enabled = optimizer_data.get("enabled", False)
    if not isinstance(enabled, bool):
        raise MalformedConfigError(
            f"{section}.settings.optimizer.enabled must be a boolean, got {enabled!r}"
        )

    # runs is kept as inert data when the optimizer is disabled
    optimizer = OptimizerSettings(
        enabled=enabled,
        runs=_optional_int(optimizer_data, "runs", f"{section}.settings.optimizer"),
    )

    return CompilerProfile(version=version, optimizer=optimizer, compiler_source=compiler_source)


def parse_paths(data: Mapping[str, Any]) -> PathSet:
    """
    Parse the ``paths`` section.

    Raises:
        MalformedConfigError: If any of artifacts/cache/sources/tests is
            missing or not a non-empty string
    """
    data = _require_mapping(data, "paths")

    missing = [key for key in PATH_KEYS if key not in data]
    if missing:
        raise MalformedConfigError(f"paths is missing required field(s): {', '.join(missing)}")

    for key in PATH_KEYS:
        if not isinstance(data[key], str) or not data[key]:
            raise MalformedConfigError(f"paths.{key} must be a non-empty string")

    return PathSet(**{key: data[key] for key in PATH_KEYS})


def network_to_dict(profile: NetworkProfile) -> Dict[str, Any]:
    """Serialize a NetworkProfile to its ``networks`` entry."""
    entry: Dict[str, Any] = {
        "url": profile.url,
        "accounts": list(profile.accounts),
    }
    # Add optional fields
    if profile.gas_price is not None:
        entry["gasPrice"] = profile.gas_price
    if profile.chain_id is not None:
        entry["chainId"] = profile.chain_id
    return entry


def compiler_to_dict(profile: CompilerProfile) -> Dict[str, Any]:
    """Serialize a CompilerProfile to its compiler section."""
    optimizer: Dict[str, Any] = {"enabled": profile.optimizer.enabled}
    if profile.optimizer.runs is not None:
        optimizer["runs"] = profile.optimizer.runs

    section: Dict[str, Any] = {"version": profile.version}
    if profile.compiler_source is not None:
        section["compilerSource"] = profile.compiler_source.value
    section["settings"] = {"optimizer": optimizer}
    return section


def paths_to_dict(paths: PathSet) -> Dict[str, str]:
    """Serialize a PathSet to the ``paths`` section."""
    return {key: getattr(paths, key) for key in PATH_KEYS}
