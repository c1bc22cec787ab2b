"""Network endpoint checks for hardhat-config library."""

import logging

import requests

from .exceptions import EndpointError, MalformedConfigError
from .types import NetworkProfile

logger = logging.getLogger(__name__)


def fetch_chain_id(url: str, timeout: float = 30) -> int:
    """
    Ask a JSON-RPC endpoint for its chain ID.

    Args:
        url: RPC endpoint URL
        timeout: Request timeout in seconds

    Returns:
        Chain ID reported by eth_chainId

    Raises:
        EndpointError: If the request fails, the endpoint returns an
            HTTP or RPC error, or the response is not a hex quantity
    """
    try:
        response = requests.post(
            url,
            json={
                "jsonrpc": "2.0",
                "method": "eth_chainId",
                "params": [],
                "id": 1,
            },
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise EndpointError(f"Network error during RPC call to {url}: {e}") from e

    # Check for HTTP errors
    if response.status_code != 200:
        raise EndpointError(f"RPC request to {url} failed with status {response.status_code}")

    try:
        result = response.json()
    except ValueError as e:
        raise EndpointError(f"RPC response from {url} is not JSON") from e

    # Check for RPC errors
    if "error" in result:
        raise EndpointError(f"RPC error from {url}: {result['error']}")

    try:
        return int(result["result"], 16)
    except (KeyError, TypeError, ValueError) as e:
        raise EndpointError(f"Unexpected eth_chainId response from {url}: {result!r}") from e


def verify_chain_id(profile: NetworkProfile, timeout: float = 30) -> int:
    """
    Check that a network's endpoint serves the chain the profile declares.

    Args:
        profile: Network profile to check
        timeout: Request timeout in seconds

    Returns:
        Chain ID reported by the endpoint

    Raises:
        EndpointError: If the endpoint cannot be queried
        MalformedConfigError: If the profile declares a different chainId
    """
    chain_id = fetch_chain_id(profile.url, timeout=timeout)
    logger.debug("Network %s reports chain ID %d", profile.name, chain_id)

    if profile.chain_id is not None and profile.chain_id != chain_id:
        raise MalformedConfigError(
            f"networks.{profile.name}.chainId is {profile.chain_id} "
            f"but {profile.url} reports {chain_id}"
        )
    return chain_id
