"""Lazily-creating asynchronous text-file storage."""
from __future__ import annotations

from sayaka_util.storage.settings import StoreSettings
from sayaka_util.storage.text_store import TextStore

__all__ = ["StoreSettings", "TextStore"]
