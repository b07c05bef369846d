"""Message composition: chains, authority markers and placeholders."""
from __future__ import annotations

from sayaka_util.messages.authority import (
    Authority,
    intercepted_authority,
    leading_marker,
    trailing_marker,
)
from sayaka_util.messages.chain import (
    MessageChain,
    MessageChainBuilder,
    PlainText,
    as_message_chain,
    as_single_message_chain_list,
    followed_by,
    to_message_chain,
)
from sayaka_util.messages.placeholder import Placeholder, PlaceholderBuilder, build_placeholder

__all__ = [
    "Authority",
    "MessageChain",
    "MessageChainBuilder",
    "Placeholder",
    "PlaceholderBuilder",
    "PlainText",
    "as_message_chain",
    "as_single_message_chain_list",
    "build_placeholder",
    "followed_by",
    "intercepted_authority",
    "leading_marker",
    "to_message_chain",
    "trailing_marker",
]
