"""Configuration for :class:`~sayaka_util.storage.TextStore`.

Settings come from keyword arguments, a YAML file, or environment
variables::

    # store.yaml
    root: data/
    max_workers: 4

    settings = StoreSettings.from_yaml("store.yaml")
"""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from sayaka_util.errors import InvalidArgumentError, requires, throws

ENV_ROOT = "SAYAKA_STORE_ROOT"
ENV_WORKERS = "SAYAKA_STORE_WORKERS"


@dataclass(frozen=True)
class StoreSettings:
    """Settings for a text store.

    Parameters
    ----------
    root:
        Directory that relative paths are resolved against. Absolute
        paths ignore it.
    max_workers:
        Size of the thread pool running reads and writes. ``None`` lets
        :class:`concurrent.futures.ThreadPoolExecutor` choose.
    encoding:
        Text encoding for every file.
    """

    root: Path = Path(".")
    max_workers: int | None = None
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root))
        if self.max_workers is not None:
            requires(
                isinstance(self.max_workers, int)
                and not isinstance(self.max_workers, bool)
                and self.max_workers > 0,
                InvalidArgumentError,
                f"max_workers must be a positive integer, got {self.max_workers!r}",
            )

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> StoreSettings:
        """Build settings from a plain dict, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        requires(
            not unknown,
            InvalidArgumentError,
            f"Unknown store settings: {unknown}",
        )
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> StoreSettings:
        """Load settings from a YAML document whose top level is a mapping."""
        text = Path(path).read_text(encoding="utf-8")
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            throws(InvalidArgumentError, f"{path} must contain a mapping")
        return cls.from_mapping(data)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> StoreSettings:
        """Load settings from ``SAYAKA_STORE_ROOT`` / ``SAYAKA_STORE_WORKERS``."""
        env = environ if environ is not None else dict(os.environ)
        data: dict[str, Any] = {}
        if env.get(ENV_ROOT):
            data["root"] = env[ENV_ROOT]
        if env.get(ENV_WORKERS):
            raw = env[ENV_WORKERS]
            requires(raw.isascii() and raw.isdecimal(), InvalidArgumentError, f"{ENV_WORKERS} must be an integer, got {raw!r}")
            data["max_workers"] = int(raw)
        return cls(**data)
