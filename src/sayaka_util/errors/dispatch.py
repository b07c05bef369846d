"""Declarative precondition checks backed by an error-kind registry.

An *error kind* is an exception class. Call sites name the kind and an
optional message; the registry owns the factories that actually build
the exception, so nothing at the call site constructs the error value.

Example
-------
::

    from sayaka_util.errors import InvalidArgumentError, requires

    requires(len(args) == 2, InvalidArgumentError, "expected two arguments")

Register a kind of your own::

    from sayaka_util.errors import error_kind

    @error_kind()
    class QuotaExceeded(Exception):
        pass

    requires(used < limit, QuotaExceeded)
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from sayaka_util.errors.faults import (
    ConfigurationFault,
    InvalidArgumentError,
    NotFoundError,
    PermissionDeniedError,
    PreconditionViolation,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseException)


class ErrorKindAlreadyRegisteredError(ValueError):
    """Raised when a kind is registered twice without ``overwrite=True``."""

    def __init__(self, kind: type[BaseException], registry_name: str) -> None:
        self.kind = kind
        self.registry_name = registry_name
        super().__init__(
            f"Error kind {kind.__qualname__} is already registered in the "
            f"{registry_name!r} registry. Pass overwrite=True to replace it."
        )


@dataclass(frozen=True)
class ErrorFactories(Generic[E]):
    """The two ways of building one error kind.

    Parameters
    ----------
    without_message:
        Builds the kind's default form. Always present.
    with_message:
        Builds the kind carrying a caller message, or ``None`` when the
        kind declares no message variant.
    """

    without_message: Callable[[], E]
    with_message: Callable[[str], E] | None = None


class ErrorKindRegistry:
    """Maps error kinds to their factories.

    Parameters
    ----------
    name:
        Human-readable name used in error messages and logs.
    """

    def __init__(self, name: str = "default") -> None:
        self._name = name
        self._kinds: dict[type[BaseException], ErrorFactories[BaseException]] = {}

    def register(
        self,
        kind: type[E],
        without_message: Callable[[], E] | None = None,
        with_message: Callable[[str], E] | None = None,
        overwrite: bool = False,
    ) -> None:
        """Register *kind* with its factories.

        ``without_message`` defaults to calling ``kind()``. The message
        form is only available when ``with_message`` is given.

        Raises
        ------
        ErrorKindAlreadyRegisteredError
            If *kind* is already registered and *overwrite* is False.
        TypeError
            If *kind* is not an exception class.
        """
        if not (isinstance(kind, type) and issubclass(kind, BaseException)):
            raise TypeError(f"Cannot register {kind!r}: it must be an exception class.")
        if kind in self._kinds and not overwrite:
            raise ErrorKindAlreadyRegisteredError(kind, self._name)
        self._kinds[kind] = ErrorFactories(
            without_message=without_message if without_message is not None else kind,
            with_message=with_message,
        )
        logger.debug(
            "Registered error kind %s (message variant: %s) in registry %r",
            kind.__qualname__,
            with_message is not None,
            self._name,
        )

    def factories(self, kind: type[E]) -> ErrorFactories[E]:
        """Return the factories registered for *kind*.

        Raises
        ------
        ConfigurationFault
            If *kind* was never registered.
        """
        try:
            return self._kinds[kind]  # type: ignore[return-value]
        except KeyError:
            raise ConfigurationFault(
                kind, f"not registered in the {self._name!r} registry"
            ) from None

    def build(self, kind: type[E], message: str | None = None) -> E:
        """Construct an instance of *kind*.

        With ``message=None`` the message-less factory is used even if a
        message factory exists.

        Raises
        ------
        ConfigurationFault
            If *kind* is unknown, or a message was given and *kind* has
            no message variant.
        """
        factories = self.factories(kind)
        if message is None:
            return factories.without_message()
        if factories.with_message is None:
            raise ConfigurationFault(kind, "has no message-accepting factory")
        return factories.with_message(message)

    def __contains__(self, kind: object) -> bool:
        return kind in self._kinds

    def __len__(self) -> int:
        return len(self._kinds)

    def __repr__(self) -> str:
        names = sorted(k.__qualname__ for k in self._kinds)
        return f"ErrorKindRegistry(name={self._name!r}, kinds={names})"


default_registry = ErrorKindRegistry()


def error_kind(
    registry: ErrorKindRegistry | None = None, *, message: bool = True
) -> Callable[[type[E]], type[E]]:
    """Class decorator registering an exception class as an error kind.

    With ``message=True`` (default) the class itself is used as the
    message factory, so it must accept a single string argument.
    """
    target = registry if registry is not None else default_registry

    def decorator(cls: type[E]) -> type[E]:
        target.register(cls, with_message=cls if message else None)
        return cls

    return decorator


def throws(
    kind: type[E], message: str | None = None, *, registry: ErrorKindRegistry | None = None
) -> NoReturn:
    """Build an error of *kind* through the registry and raise it."""
    target = registry if registry is not None else default_registry
    raise target.build(kind, message)


def requires(
    condition: bool,
    kind: type[E],
    message: str | None = None,
    *,
    registry: ErrorKindRegistry | None = None,
) -> None:
    """Raise an error of *kind* unless *condition* holds."""
    if not condition:
        throws(kind, message, registry=registry)


for _kind in (
    PreconditionViolation,
    InvalidArgumentError,
    PermissionDeniedError,
    NotFoundError,
    ValueError,
    TypeError,
    KeyError,
    LookupError,
    PermissionError,
    RuntimeError,
):
    default_registry.register(_kind, with_message=_kind)
del _kind
