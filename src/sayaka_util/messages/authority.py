"""Authority markers around outgoing messages.

When a command runs with elevated rights its reply is bracketed so the
reader can see where the elevated context starts and ends::

    [# ADMIN RIGHTS GRANTED #]
    <reply>
    [# ADMIN RIGHTS REVOKED #]

Annotation only ever adds segments. Without an authority the body comes
back unchanged, and annotating twice nests the markers.
"""
from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto

from sayaka_util.messages.chain import ChainLike, MessageChain, PlainText, to_message_chain


class Authority(Enum):
    """Elevated permission levels a command can run under."""

    ADMIN = auto()
    OWNER = auto()
    DEVELOPER = auto()

    def __str__(self) -> str:
        return self.name


def leading_marker(authority: Authority) -> str:
    return f"[# {authority} RIGHTS GRANTED #]\n"


def trailing_marker(authority: Authority) -> str:
    return f"\n[# {authority} RIGHTS REVOKED #]"


def intercepted_authority(
    body: ChainLike | Iterable[object], authority: Authority | None
) -> MessageChain:
    """Wrap *body* in the markers for *authority*, if there is one."""
    chain = to_message_chain(body)
    if authority is None:
        return chain
    return PlainText(leading_marker(authority)) + (chain + PlainText(trailing_marker(authority)))
