"""volenv: publish session-scoped environment variables on Windows.

Writes a variable into ``HKEY_CURRENT_USER\\Volatile Environment`` (REG_SZ,
discarded by Windows at logoff) and broadcasts ``WM_SETTINGCHANGE`` so
newly spawned processes pick it up without a new login.
"""

__version__ = "0.1.0"
__description__ = "Publish volatile per-user environment variables on Windows"

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
    "__version__",
]
