#!/usr/bin/env python3
"""Example: Command handler — sayaka-util

A toy ``/note`` command that stores a note per user. Usage text comes
from a metadata registry and a placeholder set; replies use a message
chain builder.

Usage:
    python examples/02_command_handler.py
"""
from __future__ import annotations

import tempfile
from dataclasses import dataclass
from pathlib import Path

import sayaka_util as su


@dataclass(frozen=True)
class Usage:
    template: str


usages: su.MetadataRegistry[Usage] = su.MetadataRegistry("usage")


@usages.metadata(Usage("usage: {cmd} <user> <text>"))
def note(store: su.TextStore, args: list[str], authority: su.Authority | None) -> su.MessageChain:
    usage = su.map_metadata(
        usages,
        note,
        lambda u: su.build_placeholder(lambda b: b.set("cmd", "/note")).apply(u.template),
    )
    su.requires(len(args) == 2, su.InvalidArgumentError, usage)
    user, text = args
    store.write(f"notes/{user}.txt", text).result()

    builder = su.MessageChainBuilder()
    builder.add_line(f"Saved note for {user}:")
    builder.add(store.read(f"notes/{user}.txt").result())
    return su.intercepted_authority(builder.build(), authority)


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        with su.TextStore(su.StoreSettings(root=Path(tmp))) as store:
            print(note(store, ["alice", "buy milk"], su.Authority.OWNER).content)
            try:
                note(store, ["alice"], None)
            except su.InvalidArgumentError as exc:
                print(exc)


if __name__ == "__main__":
    main()
