"""Outgoing message chains.

A :class:`MessageChain` is an immutable sequence of segments. Plain text
is carried by :class:`PlainText`; any other object (an image handle, a
mention, whatever the host framework sends) passes through untouched as
an opaque rich segment.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Union, overload


@dataclass(frozen=True, slots=True)
class PlainText:
    """A text segment."""

    content: str

    def __str__(self) -> str:
        return self.content


Segment = Union[PlainText, Any]
ChainLike = Union["MessageChain", PlainText, str]


def _as_segments(value: object) -> tuple[Segment, ...]:
    if isinstance(value, MessageChain):
        return value.segments
    if isinstance(value, str):
        return (PlainText(value),)
    return (value,)


@dataclass(frozen=True, slots=True)
class MessageChain:
    """Immutable sequence of message segments.

    ``+`` accepts another chain, a segment or a ``str`` on either side
    and always returns a new chain; segments are never merged.
    """

    segments: tuple[Segment, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, *parts: object) -> MessageChain:
        """Build a chain from strings, segments and chains, in order."""
        segments: list[Segment] = []
        for part in parts:
            segments.extend(_as_segments(part))
        return cls(tuple(segments))

    @property
    def content(self) -> str:
        """The chain rendered as text."""
        return "".join(str(segment) for segment in self.segments)

    def __add__(self, other: object) -> MessageChain:
        return MessageChain(self.segments + _as_segments(other))

    def __radd__(self, other: object) -> MessageChain:
        return MessageChain(_as_segments(other) + self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    @overload
    def __getitem__(self, index: int) -> Segment: ...

    @overload
    def __getitem__(self, index: slice) -> MessageChain: ...

    def __getitem__(self, index: int | slice) -> Segment | MessageChain:
        if isinstance(index, slice):
            return MessageChain(self.segments[index])
        return self.segments[index]

    def __str__(self) -> str:
        return self.content


class MessageChainBuilder:
    """Mutable accumulator that produces a :class:`MessageChain`."""

    def __init__(self) -> None:
        self._segments: list[Segment] = []

    def add(self, content: object) -> MessageChainBuilder:
        self._segments.extend(_as_segments(content))
        return self

    def add_line(self, content: object) -> MessageChainBuilder:
        """Append *content* followed by a line break.

        Strings are joined with the break into one text segment; other
        content gets a separate ``"\\n"`` segment after it.
        """
        if isinstance(content, str):
            self._segments.append(PlainText(f"{content}\n"))
        else:
            self._segments.extend(_as_segments(content))
            self._segments.append(PlainText("\n"))
        return self

    def build(self) -> MessageChain:
        return MessageChain(tuple(self._segments))

    def __len__(self) -> int:
        return len(self._segments)


def as_message_chain(text: str) -> MessageChain:
    return MessageChain((PlainText(text),))


def as_single_message_chain_list(text: str) -> list[MessageChain]:
    return [as_message_chain(text)]


def followed_by(text: str, content: ChainLike) -> MessageChain:
    """Prefix *content* with a plain-text segment."""
    return PlainText(text) + MessageChain.of(content)


def to_message_chain(value: ChainLike | Iterable[object]) -> MessageChain:
    """Coerce a chain, segment, string or iterable of parts into a chain."""
    if isinstance(value, (MessageChain, PlainText, str)):
        return MessageChain.of(value)
    return MessageChain.of(*value)
