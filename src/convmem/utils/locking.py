"""
Synchronization primitives for memory strategies.

Each strategy instance owns one ReadWriteLock: mutations take the write side,
reads take the shared side.
"""

import threading
from contextlib import contextmanager
from typing import Iterator

# Global lock for HuggingFace model loading (FlagModel). Concurrent
# from_pretrained() calls are not thread-safe, so every call site that
# constructs an embedding model must hold this lock.
model_load_lock = threading.Lock()


class ReadWriteLock:
    """
    Reader/writer lock with writer preference.

    Any number of readers may hold the lock at once; a writer holds it
    exclusively. New readers wait while a writer is waiting so a steady stream
    of readers cannot starve writers. Not reentrant.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
