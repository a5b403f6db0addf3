"""Core operations: publishing to the volatile scope and reading the environment."""

from volenv.core.environment_reader import read_current
from volenv.core.registry_publisher import (
    RegistryPublisher,
    ScopeUnavailableError,
    VolatileEnvError,
    WriteFailedError,
    publish,
)

__all__ = [
    "RegistryPublisher",
    "ScopeUnavailableError",
    "VolatileEnvError",
    "WriteFailedError",
    "publish",
    "read_current",
]
