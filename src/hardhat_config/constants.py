"""Configuration constants for hardhat-config library."""

# Top-level section names expected by the external toolchain
SECTIONS = ("zksolc", "defaultNetwork", "networks", "paths", "solidity")

# PathSet keys, in serialization order
PATH_KEYS = ("artifacts", "cache", "sources", "tests")

# Endpoint schemes accepted for network URLs
URL_SCHEMES = ("http", "https", "ws", "wss")

RPC_URL = "https://rpc.fusespark.io/"
RPC_URL_TEST = "https://rpc.fusespark.io/"

DEFAULT_NETWORK = "lisk-sepolia"

# Embedded network definitions. Signing keys are never stored here:
# each network names the environment variable holding its comma-separated keys.
NETWORK_CONFIG = {
    "fuse": {
        "url": RPC_URL,
        "accounts_env": "FUSE_PRIVATE_KEY",
    },
    "fuseSparknet": {
        "url": RPC_URL_TEST,
        "accounts_env": "FUSE_SPARKNET_PRIVATE_KEY",
    },
    "lisk-sepolia": {
        "url": "https://rpc.sepolia-api.lisk.com",
        "accounts_env": "LISK_SEPOLIA_PRIVATE_KEY",
        "gasPrice": 1000000000,  # 1 gwei
    },
}

ZKSOLC_CONFIG = {
    "version": "1.3.9",
    "compilerSource": "binary",
    "settings": {
        "optimizer": {
            "enabled": True,
        },
    },
}

SOLIDITY_CONFIG = {
    "version": "0.8.17",
    "settings": {
        "optimizer": {
            "enabled": True,
            "runs": 200,
        },
    },
}

PATHS_CONFIG = {
    "artifacts": "./artifacts-zk",
    "cache": "./cache-zk",
    "sources": "./contracts",
    "tests": "./test",
}
