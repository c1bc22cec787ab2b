"""Custom exception classes for hardhat-config library."""


class ConfigError(Exception):
    """Base exception for configuration-related errors."""

    pass


class MalformedConfigError(ConfigError, ValueError):
    """Raised when a configuration section is missing, mistyped or inconsistent."""

    pass


class UnknownNetworkError(ConfigError, KeyError):
    """Raised when a requested network profile is not declared."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class ConfigNotFoundError(ConfigError, FileNotFoundError):
    """Raised when a serialized configuration file is not found."""

    pass


class EndpointError(ConfigError, RuntimeError):
    """Raised when a network endpoint cannot be queried."""

    pass
