"""Typed metadata attached to functions and classes.

Command handlers carry descriptive metadata (usage text, required
authority, ...). Instead of scanning an object's attributes for the one
entry of a given type, each kind of metadata lives in its own
:class:`MetadataRegistry` filled in when the handler is defined.

Example
-------
::

    @dataclass(frozen=True)
    class Usage:
        text: str

    usages: MetadataRegistry[Usage] = MetadataRegistry("usage")

    @usages.metadata(Usage("/ping"))
    def ping() -> str:
        return "pong"

    map_metadata(usages, ping, lambda u: u.text)   # '/ping'
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

M = TypeVar("M")
R = TypeVar("R")
T = TypeVar("T")


class MetadataNotFoundError(KeyError):
    """Raised when a target has no metadata in the registry."""

    def __init__(self, target: object, registry_name: str) -> None:
        self.target = target
        self.registry_name = registry_name
        name = getattr(target, "__qualname__", repr(target))
        super().__init__(f"{name} has no {registry_name!r} metadata attached.")


class MetadataRegistry(Generic[M]):
    """One metadata object per target, looked up by identity.

    Parameters
    ----------
    name:
        Human-readable name used in error messages.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._entries: dict[int, tuple[object, M]] = {}

    def attach(self, target: object, metadata: M) -> None:
        """Attach *metadata* to *target*, replacing any previous entry."""
        # the target is stored alongside so its id cannot be reused
        self._entries[id(target)] = (target, metadata)
        logger.debug(
            "Attached %r metadata to %s",
            self._name,
            getattr(target, "__qualname__", target),
        )

    def metadata(self, value: M) -> Callable[[T], T]:
        """Decorator form of :meth:`attach`."""

        def decorator(target: T) -> T:
            self.attach(target, value)
            return target

        return decorator

    def get(self, target: object) -> M:
        try:
            return self._entries[id(target)][1]
        except KeyError:
            raise MetadataNotFoundError(target, self._name) from None

    def __contains__(self, target: object) -> bool:
        return id(target) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MetadataRegistry(name={self._name!r}, entries={len(self._entries)})"


def map_metadata(registry: MetadataRegistry[M], target: object, mapper: Callable[[M], R]) -> R:
    """Look up *target*'s metadata and pass it through *mapper*."""
    return mapper(registry.get(target))
