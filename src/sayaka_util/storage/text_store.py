"""Path-addressed UTF-8 text storage with lazy file creation.

Reads and the content phase of writes run on a thread pool and hand the
caller a :class:`concurrent.futures.Future`. File creation runs in the
caller's thread, so a file written with :meth:`TextStore.write` exists
as soon as the call returns, even while its content is still pending.

Concurrent writers
------------------
No locking is done per path. Two writes to the same path race: the
last one scheduled usually wins, and a reader running alongside a write
may see an empty or partially written file, since the content is
replaced with an ordinary truncating write rather than an atomic rename.
Two first writes racing to create the same file both go ahead; neither
raises. Callers that share a path between writers must serialize them.

Usage
-----
::

    with TextStore(StoreSettings(root=Path("data"))) as store:
        store.write("logs/today.txt", "hello").result()
        assert store.read("logs/today.txt").result() == "hello"
"""
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from types import TracebackType

from sayaka_util.errors import StorageFault
from sayaka_util.storage.settings import StoreSettings

logger = logging.getLogger(__name__)


class TextStore:
    """Text files addressed by path, created on first write.

    Parameters
    ----------
    settings:
        Root directory, pool size and encoding. Defaults to the current
        directory, a default-sized pool and UTF-8.
    executor:
        Pool to run I/O on. When omitted the store creates one and shuts
        it down in :meth:`close`; a passed-in executor is left running.
    """

    def __init__(
        self,
        settings: StoreSettings | None = None,
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        self._settings = settings if settings is not None else StoreSettings()
        self._owns_executor = executor is None
        self._executor = executor if executor is not None else ThreadPoolExecutor(
            max_workers=self._settings.max_workers,
            thread_name_prefix="sayaka-text-store",
        )

    @property
    def settings(self) -> StoreSettings:
        return self._settings

    def resolve(self, path: str | Path) -> Path:
        """Return *path* as an absolute path, anchored at the store root."""
        return (self._settings.root / Path(path)).absolute()

    def exists(self, path: str | Path) -> bool:
        return self.resolve(path).exists()

    def create(self, path: str | Path) -> None:
        """Create an empty file at *path*, making missing parent directories.

        The file must not exist yet.

        Raises
        ------
        StorageFault
            If the file already exists or the filesystem refuses either
            the directories or the file.
        """
        self._create(self.resolve(path), exist_ok=False)

    def _create(self, target: Path, exist_ok: bool) -> None:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageFault(target.parent, f"Cannot create directory ({exc.strerror or exc})") from exc
        try:
            target.touch(exist_ok=exist_ok)
        except FileExistsError as exc:
            raise StorageFault(target, "File already exists") from exc
        except OSError as exc:
            raise StorageFault(target, f"Cannot create file ({exc.strerror or exc})") from exc
        logger.debug("Created %s", target)

    def read(self, path: str | Path) -> Future[str]:
        """Schedule a full read of *path*.

        The returned future fails with :class:`StorageFault` if the file
        is missing or its bytes do not decode.
        """
        target = self.resolve(path)
        logger.debug("Scheduling read of %s", target)
        return self._executor.submit(self._read_text, target)

    def write(self, path: str | Path, text: str) -> Future[None]:
        """Replace the content of *path* with *text*.

        A missing file is created synchronously before the content write
        is scheduled. See the module docstring for the concurrent-writer
        hazard.

        Raises
        ------
        StorageFault
            If the file had to be created and the filesystem refused the
            directories or the file. Losing a creation race to another
            writer is not a failure. Failures of the content write surface
            through the returned future.
        """
        target = self.resolve(path)
        if not target.exists():
            # another writer may create it first; that is not an error here
            self._create(target, exist_ok=True)
        logger.debug("Scheduling write of %d characters to %s", len(text), target)
        return self._executor.submit(self._write_text, target, text)

    def close(self, wait: bool = True) -> None:
        """Shut down the pool if this store created it."""
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def __enter__(self) -> TextStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"TextStore(root={str(self._settings.root)!r})"

    # ------------------------------------------------------------------
    # Pool-side work
    # ------------------------------------------------------------------

    def _read_text(self, target: Path) -> str:
        try:
            with target.open(encoding=self._settings.encoding, newline="") as handle:
                return handle.read()
        except FileNotFoundError as exc:
            raise StorageFault(target, "File does not exist") from exc
        except UnicodeDecodeError as exc:
            raise StorageFault(target, f"Cannot decode as {self._settings.encoding}") from exc
        except OSError as exc:
            raise StorageFault(target, f"Cannot read file ({exc.strerror or exc})") from exc

    def _write_text(self, target: Path, text: str) -> None:
        try:
            # newline="" keeps the text byte-for-byte on every platform
            with target.open("w", encoding=self._settings.encoding, newline="") as handle:
                handle.write(text)
        except (OSError, UnicodeEncodeError) as exc:
            raise StorageFault(target, f"Cannot write file ({exc})") from exc
        logger.debug("Wrote %d characters to %s", len(text), target)
