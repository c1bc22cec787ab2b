"""Main API for hardhat-config library."""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

from .constants import (
    DEFAULT_NETWORK,
    NETWORK_CONFIG,
    PATHS_CONFIG,
    SECTIONS,
    SOLIDITY_CONFIG,
    ZKSOLC_CONFIG,
)
from .credentials import resolve_accounts
from .exceptions import ConfigNotFoundError, MalformedConfigError, UnknownNetworkError
from .parsers import (
    compiler_to_dict,
    network_to_dict,
    parse_compiler,
    parse_network,
    parse_paths,
    paths_to_dict,
)
from .types import CompilerProfile, NetworkProfile, PathSet

logger = logging.getLogger(__name__)


class ConfigDescriptor:
    """
    Read-only toolchain configuration: compiler stages, networks and paths.

    Built once at startup and handed to every consumer that needs it.
    """

    def __init__(
        self,
        default_network: str,
        networks: Mapping[str, NetworkProfile],
        zksolc: CompilerProfile,
        solidity: CompilerProfile,
        paths: PathSet,
    ):
        """
        Initialize the descriptor.

        Args:
            default_network: Name of the network used when none is specified
            networks: Mapping of network name -> NetworkProfile
            zksolc: Compiler profile for the zksolc stage
            solidity: Compiler profile for the solc stage
            paths: Project path overrides

        Raises:
            MalformedConfigError: If default_network names no declared network,
                or a mapping key disagrees with its profile's name
        """
        for name, profile in networks.items():
            if profile.name != name:
                raise MalformedConfigError(
                    f"Network key '{name}' does not match profile name '{profile.name}'"
                )

        if default_network not in networks:
            raise MalformedConfigError(
                f"defaultNetwork '{default_network}' does not match any declared network "
                f"({', '.join(networks) or 'none declared'})"
            )

        self._default_network = default_network
        self._networks = MappingProxyType(dict(networks))
        self._zksolc = zksolc
        self._solidity = solidity
        self._paths = paths

    @property
    def default_network(self) -> str:
        return self._default_network

    @property
    def networks(self) -> Mapping[str, NetworkProfile]:
        return self._networks

    @property
    def zksolc(self) -> CompilerProfile:
        return self._zksolc

    @property
    def solidity(self) -> CompilerProfile:
        return self._solidity

    @property
    def paths(self) -> PathSet:
        return self._paths

    def has_network(self, name: str) -> bool:
        """
        Check if a network is declared.

        Args:
            name: Network name to check

        Returns:
            True if network is declared, False otherwise
        """
        return name in self._networks

    def network_names(self) -> List[str]:
        """Get declared network names, in declaration order."""
        return list(self._networks.keys())

    def get_network(self, name: str) -> NetworkProfile:
        """
        Get the profile for a network.

        Args:
            name: Network name

        Returns:
            NetworkProfile

        Raises:
            UnknownNetworkError: If network is not declared
        """
        if not self.has_network(name):
            raise UnknownNetworkError(f"Network '{name}' is not declared")
        return self._networks[name]

    def get_default_network(self) -> NetworkProfile:
        """
        Get the profile referenced by defaultNetwork.

        Returns:
            The same object as get_network(default_network)

        Raises:
            MalformedConfigError: If defaultNetwork names no declared network
        """
        try:
            return self.get_network(self._default_network)
        except UnknownNetworkError as e:
            raise MalformedConfigError(
                f"defaultNetwork '{self._default_network}' does not match any declared network"
            ) from e

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ConfigDescriptor":
        """
        Build a descriptor from the toolchain's section mapping.

        Args:
            data: Mapping with zksolc, defaultNetwork, networks, paths and
                  solidity sections

        Returns:
            ConfigDescriptor

        Raises:
            MalformedConfigError: If a section is missing or invalid
        """
        if not isinstance(data, Mapping):
            raise MalformedConfigError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )

        missing = [section for section in SECTIONS if section not in data]
        if missing:
            raise MalformedConfigError(
                f"Configuration is missing required section(s): {', '.join(missing)}"
            )

        default_network = data["defaultNetwork"]
        if not isinstance(default_network, str):
            raise MalformedConfigError(
                f"defaultNetwork must be a string, got {default_network!r}"
            )

        networks_data = data["networks"]
        if not isinstance(networks_data, Mapping):
            raise MalformedConfigError("networks must be a mapping of name -> network")

        networks = {
            name: parse_network(name, entry) for name, entry in networks_data.items()
        }

        return cls(
            default_network=default_network,
            networks=networks,
            zksolc=parse_compiler("zksolc", data["zksolc"]),
            solidity=parse_compiler("solidity", data["solidity"]),
            paths=parse_paths(data["paths"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the toolchain's section mapping.

        Returns:
            Dictionary accepted by from_dict, field-for-field equal on reload
        """
        return {
            "zksolc": compiler_to_dict(self._zksolc),
            "defaultNetwork": self._default_network,
            "networks": {
                name: network_to_dict(profile) for name, profile in self._networks.items()
            },
            "paths": paths_to_dict(self._paths),
            "solidity": compiler_to_dict(self._solidity),
        }

    def dump(self, output_path: Union[Path, str]) -> str:
        """
        Write the descriptor as JSON.

        Creates parent directories if they don't exist. The output contains
        signing keys; keep it out of version control.

        Args:
            output_path: Destination file

        Returns:
            Path where the configuration was saved
        """
        output_path_obj = Path(output_path)
        output_path_obj.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path_obj, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        return str(output_path_obj)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigDescriptor):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"ConfigDescriptor(default_network={self._default_network!r}, "
            f"networks={self.network_names()!r})"
        )


def load(environ: Optional[Mapping[str, str]] = None) -> ConfigDescriptor:
    """
    Build the descriptor from the embedded configuration.

    Signing keys are read from the environment variable each network names
    (see NETWORK_CONFIG); an unset variable leaves that network without accounts.

    Args:
        environ: Mapping to read credentials from (defaults to os.environ)

    Returns:
        ConfigDescriptor

    Raises:
        MalformedConfigError: If the default network is not declared, a URL
            or key is malformed, or a required path is missing
    """
    networks: Dict[str, Dict[str, Any]] = {}
    for name, network_config in NETWORK_CONFIG.items():
        entry = {key: value for key, value in network_config.items() if key != "accounts_env"}
        entry["accounts"] = list(resolve_accounts(network_config["accounts_env"], environ))
        networks[name] = entry

    descriptor = ConfigDescriptor.from_dict(
        {
            "zksolc": ZKSOLC_CONFIG,
            "defaultNetwork": DEFAULT_NETWORK,
            "networks": networks,
            "paths": PATHS_CONFIG,
            "solidity": SOLIDITY_CONFIG,
        }
    )
    logger.debug(
        "Loaded configuration with networks %s (default '%s')",
        descriptor.network_names(),
        descriptor.default_network,
    )
    return descriptor


def load_from_file(config_path: Union[Path, str]) -> ConfigDescriptor:
    """
    Load a descriptor previously written with ConfigDescriptor.dump().

    Args:
        config_path: Path to JSON configuration file

    Returns:
        ConfigDescriptor

    Raises:
        ConfigNotFoundError: If the path is not an existing file
        MalformedConfigError: If the file is not valid JSON or fails validation
    """
    path = Path(config_path)
    if not path.is_file():
        raise ConfigNotFoundError(f"Configuration file not found at {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedConfigError(f"Configuration file {path} is not valid JSON: {e}") from e

    return ConfigDescriptor.from_dict(data)
