"""Error kinds, declarative checks and fault types."""
from __future__ import annotations

from sayaka_util.errors.dispatch import (
    ErrorFactories,
    ErrorKindAlreadyRegisteredError,
    ErrorKindRegistry,
    default_registry,
    error_kind,
    requires,
    throws,
)
from sayaka_util.errors.faults import (
    ConfigurationFault,
    InvalidArgumentError,
    NotFoundError,
    PermissionDeniedError,
    PreconditionViolation,
    SayakaUtilError,
    StorageFault,
)

__all__ = [
    "ConfigurationFault",
    "ErrorFactories",
    "ErrorKindAlreadyRegisteredError",
    "ErrorKindRegistry",
    "InvalidArgumentError",
    "NotFoundError",
    "PermissionDeniedError",
    "PreconditionViolation",
    "SayakaUtilError",
    "StorageFault",
    "default_registry",
    "error_kind",
    "requires",
    "throws",
]
