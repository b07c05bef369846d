"""sayaka-util — helpers for a chat-bot plugin: text storage, declarative checks, message composition.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import sayaka_util as su

    # Fail a command early with a typed error
    su.requires(len(args) == 1, su.InvalidArgumentError, "usage: /echo <text>")

    # Persist text; the file and its directories appear on first write
    with su.TextStore() as store:
        store.write("logs/today.txt", "hello").result()
        store.read("logs/today.txt").result()   # 'hello'

    # Mark a reply produced under elevated rights
    reply = su.intercepted_authority("ping", su.Authority.ADMIN)

    # Fill a usage template
    ph = su.build_placeholder(lambda b: b.set("cmd", "/echo"))
    ph.apply("usage: {cmd} <text>")
"""
from __future__ import annotations

__version__: str = "0.1.0"

from sayaka_util.errors import (
    ConfigurationFault,
    ErrorKindRegistry,
    InvalidArgumentError,
    NotFoundError,
    PermissionDeniedError,
    PreconditionViolation,
    SayakaUtilError,
    StorageFault,
    error_kind,
    requires,
    throws,
)
from sayaka_util.messages import (
    Authority,
    MessageChain,
    MessageChainBuilder,
    Placeholder,
    PlaceholderBuilder,
    PlainText,
    as_message_chain,
    build_placeholder,
    followed_by,
    intercepted_authority,
)
from sayaka_util.metadata import MetadataRegistry, map_metadata
from sayaka_util.serialization import JsonCodec, SerializationError
from sayaka_util.storage import StoreSettings, TextStore

__all__ = [
    "__version__",
    "Authority",
    "ConfigurationFault",
    "ErrorKindRegistry",
    "InvalidArgumentError",
    "JsonCodec",
    "MessageChain",
    "MessageChainBuilder",
    "MetadataRegistry",
    "NotFoundError",
    "PermissionDeniedError",
    "Placeholder",
    "PlaceholderBuilder",
    "PlainText",
    "PreconditionViolation",
    "SayakaUtilError",
    "SerializationError",
    "StorageFault",
    "StoreSettings",
    "TextStore",
    "as_message_chain",
    "build_placeholder",
    "error_kind",
    "followed_by",
    "intercepted_authority",
    "map_metadata",
    "requires",
    "throws",
]
