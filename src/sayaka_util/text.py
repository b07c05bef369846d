"""Small string, path and collection helpers used by command handlers."""
from __future__ import annotations

import re
import time
from collections.abc import Callable, Collection, Iterable
from datetime import timedelta
from pathlib import Path
from typing import TextIO, TypeVar

T = TypeVar("T")

# A QQ account number: digits, no leading zero.
QQ_ID_REGEX = r"(?!0+\d*)\d+"

EMPTY = ""


def to_path(value: str) -> Path:
    return Path(value)


def to_absolute_path(value: str) -> Path:
    return Path(value).absolute()


def mkdirs(path: str | Path) -> bool:
    """Create *path* and its parents; return False if it already existed."""
    target = Path(path)
    if target.is_dir():
        return False
    target.mkdir(parents=True, exist_ok=True)
    return True


def duration_now() -> timedelta:
    """Time since the Unix epoch, millisecond precision."""
    return timedelta(milliseconds=int(time.time() * 1000))


def build_list_immutable(block: Callable[[list[T]], object]) -> tuple[T, ...]:
    """Fill a list inside *block*, then hand it back frozen."""
    items: list[T] = []
    block(items)
    return tuple(items)


def append_indent(buffer: TextIO, content: str, indent_level: int = 1, indent: int = 4) -> TextIO:
    buffer.write(" " * (indent_level * indent))
    buffer.write(content)
    return buffer


def append_line_indent(buffer: TextIO, content: str, indent_level: int = 1, indent: int = 4) -> TextIO:
    append_indent(buffer, content, indent_level, indent)
    buffer.write("\n")
    return buffer


def indent_string(content: str, indent_level: int = 1, indent: int = 4) -> str:
    return " " * (indent_level * indent) + content


def match(text: str, pattern: str | re.Pattern[str]) -> re.Match[str] | None:
    """First match of *pattern* anywhere in *text*."""
    return re.search(pattern, text)


def to_single_list(value: T) -> list[T]:
    return [value]


def truncate_pair(items: Collection[T]) -> tuple[T, T]:
    """The first two elements of *items*.

    Raises
    ------
    ValueError
        If *items* has fewer than two elements.
    """
    head = list(items)[:2]
    if len(head) < 2:
        raise ValueError(f"Expected at least two elements, got {len(head)}")
    return head[0], head[1]


def cast_all(items: Iterable[object], cls: type[T]) -> list[T]:
    """Return *items* as a list of *cls*, checking every element.

    Raises
    ------
    TypeError
        On the first element that is not an instance of *cls*.
    """
    result: list[T] = []
    for index, item in enumerate(items):
        if not isinstance(item, cls):
            raise TypeError(
                f"Element {index} is {type(item).__name__}, expected {cls.__name__}"
            )
        result.append(item)
    return result
