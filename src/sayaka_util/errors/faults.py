"""Fault types raised by sayaka-util.

Three families propagate out of the library:

``PreconditionViolation``
    Raised through :func:`sayaka_util.errors.requires` when a caller's
    boolean check fails. Subclasses identify the kind of failure.
``StorageFault``
    Raised when the text store cannot create, read, write or decode a
    file. The underlying ``OSError`` or ``UnicodeDecodeError`` is kept as
    ``__cause__``.
``ConfigurationFault``
    Raised when an error kind has no factory for the requested form.
    This is a programming defect and sits outside the
    ``SayakaUtilError`` hierarchy entirely.
"""
from __future__ import annotations

from pathlib import Path


class SayakaUtilError(Exception):
    """Base class for every fault raised by this library."""


class PreconditionViolation(SayakaUtilError):
    """A caller-supplied check failed."""

    default_message: str = "Precondition failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)


class InvalidArgumentError(PreconditionViolation):
    default_message = "Invalid argument"


class PermissionDeniedError(PreconditionViolation):
    default_message = "Permission denied"


class NotFoundError(PreconditionViolation):
    default_message = "Not found"


class StorageFault(SayakaUtilError):
    """A filesystem operation on the text store failed.

    Parameters
    ----------
    path:
        The path the operation targeted.
    reason:
        Short description of what went wrong.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{reason}: {self.path}")


class ConfigurationFault(RuntimeError):
    """An error kind cannot be constructed in the requested form.

    Not a :class:`SayakaUtilError`: handlers catching library faults
    must not absorb a programming defect.
    """

    def __init__(self, kind: type[BaseException], detail: str) -> None:
        self.kind = kind
        super().__init__(f"Error kind {kind.__qualname__}: {detail}")
