# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-20
# Description: keyed_lock.py
# -----------------------------------------------------------------------------
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List


@dataclass
class _LockEntry:
    lock: threading.Lock = field(default_factory=threading.Lock)
    # threads holding or waiting on `lock`
    users: int = 0


class KeyedLock:
    """
    One mutual-exclusion region per key (e.g. per doc_id).

    Locks are created on first use and dropped once no thread holds or
    waits for them, so the table only ever contains keys in flight.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._entries: Dict[str, _LockEntry] = {}

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        with self._guard:
            entry = self._entries.setdefault(key, _LockEntry())
            entry.users += 1

        entry.lock.acquire()
        try:
            yield
        finally:
            entry.lock.release()
            with self._guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._entries[key]

    def active_keys(self) -> List[str]:
        with self._guard:
            return list(self._entries.keys())
