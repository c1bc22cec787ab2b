"""Data types and dataclasses for hardhat-config library."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class CompilerSource(Enum):
    """
    How the external toolchain acquires a compiler.

    Value strings define de/serialization law (``compilerSource`` key).
    """

    BINARY = "binary"
    SOURCE = "source"


@dataclass(frozen=True)
class NetworkProfile:
    """Settings for one target network."""

    name: str  # Unique key, e.g. "lisk-sepolia"
    url: str  # JSON-RPC endpoint
    accounts: Tuple[str, ...] = field(default=(), repr=False)  # Private keys, in order

    # Optional fields
    gas_price: Optional[int] = None  # Wei
    chain_id: Optional[int] = None


@dataclass(frozen=True)
class OptimizerSettings:
    """Compiler optimizer settings. ``runs`` is inert when disabled."""

    enabled: bool = False
    runs: Optional[int] = None


@dataclass(frozen=True)
class CompilerProfile:
    """Settings for one compiler stage (``zksolc`` or ``solidity``)."""

    version: str  # Semantic version, e.g. "0.8.17"
    optimizer: OptimizerSettings = field(default_factory=OptimizerSettings)
    compiler_source: Optional[CompilerSource] = None


@dataclass(frozen=True)
class PathSet:
    """Project directory overrides, possibly relative to the project root."""

    artifacts: str
    cache: str
    sources: str
    tests: str
