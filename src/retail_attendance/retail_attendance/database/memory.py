from __future__ import annotations

import itertools
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator

TABLES = ("users", "stores", "attendance", "targets", "brands", "products", "inventory")


class MemoryDatabase:
    """Process-lifetime entity store shared by the in-memory repositories.

    One table (id -> record) and one id sequence per entity type. Ids start at
    1 and are never reused. Every write goes through ``transaction()`` so that
    a mutation, or a compound use case spanning several tables, is never seen
    half done by another request thread.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._tables: Dict[str, Dict[int, Any]] = {name: {} for name in TABLES}
        self._sequences = {name: itertools.count(1) for name in TABLES}

    @contextmanager
    def transaction(self) -> Iterator["MemoryDatabase"]:
        with self._lock:
            yield self

    def table(self, name: str) -> Dict[int, Any]:
        return self._tables[name]

    def next_id(self, name: str) -> int:
        with self._lock:
            return next(self._sequences[name])
