"""Shared pytest fixtures for hardhat-config tests."""

import copy
import json
from pathlib import Path
from typing import Any, Dict

import pytest

# Well-known development keys (hardhat/anvil accounts #0 and #1)
TEST_KEY_0 = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_KEY_1 = "0x59c6995e998f97a5a0044966f0945389dc9e86dae88c7a8412f4603b6b78690d"


@pytest.fixture
def sample_config_dict() -> Dict[str, Any]:
    """Return a complete configuration mapping in the toolchain's layout."""
    return copy.deepcopy(
        {
            "zksolc": {
                "version": "1.3.9",
                "compilerSource": "binary",
                "settings": {"optimizer": {"enabled": True}},
            },
            "defaultNetwork": "lisk-sepolia",
            "networks": {
                "fuse": {
                    "url": "https://rpc.fusespark.io/",
                    "accounts": [TEST_KEY_0],
                },
                "lisk-sepolia": {
                    "url": "https://rpc.sepolia-api.lisk.com",
                    "accounts": [TEST_KEY_0, TEST_KEY_1],
                    "gasPrice": 1000000000,
                    "chainId": 4202,
                },
            },
            "paths": {
                "artifacts": "./artifacts-zk",
                "cache": "./cache-zk",
                "sources": "./contracts",
                "tests": "./test",
            },
            "solidity": {
                "version": "0.8.17",
                "settings": {"optimizer": {"enabled": True, "runs": 200}},
            },
        }
    )


@pytest.fixture
def sample_environ() -> Dict[str, str]:
    """Return an environment mapping with credentials for every embedded network."""
    return {
        "FUSE_PRIVATE_KEY": TEST_KEY_0,
        "FUSE_SPARKNET_PRIVATE_KEY": TEST_KEY_1,
        "LISK_SEPOLIA_PRIVATE_KEY": f"{TEST_KEY_0},{TEST_KEY_1}",
    }


@pytest.fixture
def temp_config_file(tmp_path: Path, sample_config_dict: Dict[str, Any]) -> Path:
    """Create a temporary JSON configuration file with sample data."""
    config_path = tmp_path / "hardhat-config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_dict, f, indent=2)
    return config_path
