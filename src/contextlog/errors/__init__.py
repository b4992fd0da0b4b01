"""Error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── ConfigError              (config.py)
    │   ├── UnknownStreamTypeError
    │   ├── MissingStreamPathError
    │   ├── UnknownEnvironmentError
    │   └── InvalidLogLevelError
    ├── ScopeError               (scope.py)
    │   └── LoggerNotBoundError
    └── InfrastructureError      (infrastructure.py)
        ├── ExternalServiceError
        └── NotificationTimeoutError
"""

from contextlog.errors.base import BaseError
from contextlog.errors.config import (
    ConfigError,
    InvalidLogLevelError,
    MissingStreamPathError,
    UnknownEnvironmentError,
    UnknownStreamTypeError,
)
from contextlog.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    NotificationTimeoutError,
)
from contextlog.errors.scope import LoggerNotBoundError, ScopeError

__all__ = [
    "BaseError",
    "ConfigError",
    "ExternalServiceError",
    "InfrastructureError",
    "InvalidLogLevelError",
    "LoggerNotBoundError",
    "MissingStreamPathError",
    "NotificationTimeoutError",
    "ScopeError",
    "UnknownEnvironmentError",
    "UnknownStreamTypeError",
]
