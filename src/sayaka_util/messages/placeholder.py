"""Placeholder sets for message templates.

A placeholder set binds slot identifiers to substitution values. Names
(``str``) and positions (``int``) are both valid slots. Sets are built
in one step and are read-only afterwards::

    ph = build_placeholder(lambda b: b.set("user", "alice").set(0, "!ping"))
    ph.apply("{user} ran {0}")   # 'alice ran !ping'
"""
from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Union

Slot = Union[str, int]

_TOKEN = re.compile(r"\{(\w+)\}")


class Placeholder(Mapping[Slot, Any]):
    """Immutable slot -> value mapping produced by :class:`PlaceholderBuilder`."""

    __slots__ = ("_bindings",)

    def __init__(self, bindings: Mapping[Slot, Any] | None = None) -> None:
        self._bindings: Mapping[Slot, Any] = MappingProxyType(dict(bindings or {}))

    def __getitem__(self, slot: Slot) -> Any:
        return self._bindings[slot]

    def __iter__(self) -> Iterator[Slot]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"Placeholder({dict(self._bindings)!r})"

    def apply(self, template: str) -> str:
        """Substitute ``{slot}`` tokens whose slot is bound.

        Digit-only tokens address positional slots. Unbound tokens are
        left as they are.
        """

        def replace(match: re.Match[str]) -> str:
            token = match.group(1)
            slot: Slot = int(token) if token.isdigit() else token
            if slot in self._bindings:
                return str(self._bindings[slot])
            return match.group(0)

        return _TOKEN.sub(replace, template)


class PlaceholderBuilder:
    """Accumulates slot bindings; binding a slot again replaces the value."""

    def __init__(self) -> None:
        self._bindings: dict[Slot, Any] = {}

    def set(self, slot: Slot, value: Any) -> PlaceholderBuilder:
        if not isinstance(slot, (str, int)) or isinstance(slot, bool):
            raise TypeError(f"Placeholder slots must be str or int, got {type(slot).__name__}")
        self._bindings[slot] = value
        return self

    def __setitem__(self, slot: Slot, value: Any) -> None:
        self.set(slot, value)

    def build(self) -> Placeholder:
        return Placeholder(self._bindings)


def build_placeholder(block: Callable[[PlaceholderBuilder], object]) -> Placeholder:
    """Run *block* against a fresh builder and freeze the result."""
    builder = PlaceholderBuilder()
    block(builder)
    return builder.build()
