"""
hardhat-config: Python library for smart-contract toolchain configuration
"""

from importlib.metadata import PackageNotFoundError, version

from .descriptor import ConfigDescriptor, load, load_from_file
from .exceptions import (
    ConfigError,
    ConfigNotFoundError,
    EndpointError,
    MalformedConfigError,
    UnknownNetworkError,
)
from .rpc import fetch_chain_id, verify_chain_id
from .types import CompilerProfile, CompilerSource, NetworkProfile, OptimizerSettings, PathSet

try:
    __version__ = version("hardhat-config")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "ConfigDescriptor",
    "load",
    "load_from_file",
    "fetch_chain_id",
    "verify_chain_id",
    "NetworkProfile",
    "CompilerProfile",
    "CompilerSource",
    "OptimizerSettings",
    "PathSet",
    "ConfigError",
    "MalformedConfigError",
    "UnknownNetworkError",
    "ConfigNotFoundError",
    "EndpointError",
]
