"""Readers-writer lock for Localizer state.

Translations and format calls only read the message store and format tables,
so many threads may run them at once. Replacing or merging messages and
formats needs exclusive access.

- Multiple concurrent readers
- One exclusive writer
- Writer preference: once a writer waits, new readers queue behind it
- Reentrant reads: linked-message resolution re-enters the read lock from
  the same thread, and that must not queue behind a waiting writer

Read-to-write upgrades, write-to-read downgrades and nested writes are
rejected with RuntimeError. A missing handler that calls set_messages() from
inside a translation therefore fails loudly instead of deadlocking.

Python 3.13+.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     with lock.read():  # same thread may nest reads
        ...         pass
        >>> with lock.write():
        ...     pass
    """

    __slots__ = (
        "_active_readers",
        "_active_writer",
        "_condition",
        "_reader_threads",
        "_waiting_writers",
    )

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._active_readers: int = 0
        self._active_writer: int | None = None
        self._waiting_writers: int = 0
        # thread id -> nesting count
        self._reader_threads: dict[int, int] = {}

    @contextmanager
    def read(self) -> Generator[None]:
        """Hold the lock shared for the duration of the block.

        Raises:
            RuntimeError: If the calling thread holds the write lock
        """
        self._acquire_read()
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self) -> Generator[None]:
        """Hold the lock exclusively for the duration of the block.

        Raises:
            RuntimeError: If the calling thread already holds the read or
                write lock
        """
        self._acquire_write()
        try:
            yield
        finally:
            self._release_write()

    def _acquire_read(self) -> None:
        thread_id = threading.get_ident()
        with self._condition:
            if thread_id in self._reader_threads:
                self._reader_threads[thread_id] += 1
                return
            if self._active_writer == thread_id:
                msg = "Cannot acquire read lock while holding write lock"
                raise RuntimeError(msg)
            while self._active_writer is not None or self._waiting_writers > 0:
                self._condition.wait()
            self._active_readers += 1
            self._reader_threads[thread_id] = 1

    def _release_read(self) -> None:
        thread_id = threading.get_ident()
        with self._condition:
            if thread_id not in self._reader_threads:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)
            self._reader_threads[thread_id] -= 1
            if self._reader_threads[thread_id] == 0:
                del self._reader_threads[thread_id]
                self._active_readers -= 1
                if self._active_readers == 0:
                    self._condition.notify_all()

    def _acquire_write(self) -> None:
        thread_id = threading.get_ident()
        with self._condition:
            if thread_id in self._reader_threads:
                msg = "Cannot upgrade read lock to write lock"
                raise RuntimeError(msg)
            if self._active_writer == thread_id:
                msg = "Cannot acquire write lock: already holding write lock"
                raise RuntimeError(msg)
            self._waiting_writers += 1
            try:
                while self._active_readers > 0 or self._active_writer is not None:
                    self._condition.wait()
                self._active_writer = thread_id
            finally:
                self._waiting_writers -= 1
                self._condition.notify_all()

    def _release_write(self) -> None:
        thread_id = threading.get_ident()
        with self._condition:
            if self._active_writer != thread_id:
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)
            self._active_writer = None
            self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Number of distinct threads currently holding the read lock."""
        with self._condition:
            return self._active_readers

    @property
    def writer_active(self) -> bool:
        """True while some thread holds the write lock."""
        with self._condition:
            return self._active_writer is not None
