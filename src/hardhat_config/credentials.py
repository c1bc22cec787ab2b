"""Signing credential resolution for hardhat-config library."""

import logging
import os
from typing import Mapping, Optional, Tuple

from .exceptions import MalformedConfigError
from .parsers import is_valid_private_key

logger = logging.getLogger(__name__)


def resolve_accounts(
    env_var: str, environ: Optional[Mapping[str, str]] = None
) -> Tuple[str, ...]:
    """
    Read signing keys for a network from an environment variable.

    The variable holds a comma-separated list of private keys. Surrounding
    whitespace is stripped and empty entries are dropped.

    Args:
        env_var: Environment variable name, e.g. "LISK_SEPOLIA_PRIVATE_KEY"
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Ordered tuple of private keys; empty if the variable is unset

    Raises:
        MalformedConfigError: If any entry is not a well-formed private key
    """
    if environ is None:
        environ = os.environ

    raw = environ.get(env_var)
    if raw is None:
        logger.debug("%s not set, no signing accounts", env_var)
        return ()

    accounts = tuple(entry.strip() for entry in raw.split(",") if entry.strip())
    for index, key in enumerate(accounts):
        if not is_valid_private_key(key):
            # Never echo the key itself
            raise MalformedConfigError(
                f"Entry {index} of ${env_var} is not a well-formed private key"
            )

    logger.debug("Resolved %d signing account(s) from %s", len(accounts), env_var)
    return accounts
