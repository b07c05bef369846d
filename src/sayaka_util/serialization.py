"""JSON (and YAML) conversion through an explicitly constructed codec.

There is no process-wide serializer: components that need one create a
:class:`JsonCodec` and pass it where it is needed.

Usage
-----
::

    codec = JsonCodec(indent=2)
    text = codec.to_json(Profile(name="alice", level=Authority.ADMIN))
    data = codec.from_json(text)                 # plain dict
    profile = codec.from_json(text, Profile)     # dataclass again
"""
from __future__ import annotations

import dataclasses
import json
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar, overload

import yaml

from sayaka_util.errors import SayakaUtilError

T = TypeVar("T")


class SerializationError(SayakaUtilError):
    """Raised when text cannot be parsed or converted to the target type."""


class JsonCodec:
    """Converts between Python values and JSON/YAML text.

    Dataclasses are written as dicts, enums by member name and paths as
    strings. Reading back with a dataclass target calls the dataclass
    with the decoded mapping as keyword arguments.

    Parameters
    ----------
    indent:
        JSON indentation; ``None`` gives compact output.
    sort_keys:
        Sort object keys in the output.
    """

    def __init__(self, indent: int | None = None, sort_keys: bool = False) -> None:
        self._indent = indent
        self._sort_keys = sort_keys

    # ------------------------------------------------------------------
    # Value conversion
    # ------------------------------------------------------------------

    def to_data(self, value: Any) -> Any:
        """Convert *value* into JSON-compatible plain data."""
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return {f.name: self.to_data(getattr(value, f.name)) for f in dataclasses.fields(value)}
        if isinstance(value, Enum):
            return value.name
        if isinstance(value, Path):
            return str(value)
        if isinstance(value, dict):
            return {str(k): self.to_data(v) for k, v in value.items()}
        if isinstance(value, (list, tuple, set, frozenset)):
            return [self.to_data(v) for v in value]
        return value

    @overload
    def from_data(self, data: Any, cls: None = None) -> Any: ...

    @overload
    def from_data(self, data: Any, cls: type[T]) -> T: ...

    def from_data(self, data: Any, cls: type[T] | None = None) -> Any:
        if cls is None:
            return data
        if dataclasses.is_dataclass(cls):
            if not isinstance(data, dict):
                raise SerializationError(
                    f"Expected an object for {cls.__name__}, got {type(data).__name__}"
                )
            try:
                return cls(**data)
            except TypeError as exc:
                raise SerializationError(f"Cannot build {cls.__name__}: {exc}") from exc
        if issubclass(cls, Enum):
            try:
                return cls[data]
            except KeyError:
                raise SerializationError(f"{data!r} is not a member of {cls.__name__}") from None
        if not isinstance(data, cls):
            raise SerializationError(f"Expected {cls.__name__}, got {type(data).__name__}")
        return data

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, value: Any) -> str:
        try:
            return json.dumps(
                self.to_data(value),
                indent=self._indent,
                sort_keys=self._sort_keys,
                ensure_ascii=False,
            )
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Cannot serialize {type(value).__name__}: {exc}") from exc

    def from_json(self, text: str, cls: type[T] | None = None) -> Any:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SerializationError(f"Malformed JSON: {exc}") from exc
        return self.from_data(data, cls)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, value: Any) -> str:
        return yaml.safe_dump(
            self.to_data(value),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=self._sort_keys,
        )

    def from_yaml(self, text: str, cls: type[T] | None = None) -> Any:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SerializationError(f"Malformed YAML: {exc}") from exc
        return self.from_data(data, cls)
