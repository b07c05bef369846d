#!/usr/bin/env python3
"""Example: Quickstart — sayaka-util

Write and read a stored file, check a precondition, and mark a reply
with authority markers.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install sayaka-util
"""
from __future__ import annotations

import tempfile
from pathlib import Path

import sayaka_util as su


def main() -> None:
    print(f"sayaka-util version: {su.__version__}")

    with tempfile.TemporaryDirectory() as tmp:
        # Step 1: the file and its directory are created on first write
        with su.TextStore(su.StoreSettings(root=Path(tmp))) as store:
            store.write("logs/today.txt", "hello").result()
            print(f"Stored: {store.read('logs/today.txt').result()!r}")

    # Step 2: a failed check raises the named error kind
    try:
        su.requires(False, su.PermissionDeniedError, "admins only")
    except su.PermissionDeniedError as exc:
        print(f"Rejected: {exc}")

    # Step 3: annotate a reply produced with elevated rights
    reply = su.intercepted_authority("ping", su.Authority.ADMIN)
    print(reply.content)


if __name__ == "__main__":
    main()
