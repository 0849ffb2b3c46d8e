"""
Flat file storage for the mailing list collection.

The whole collection lives in one JSON file holding an array of
``{"name": ..., "members": [...]}`` objects.  There is no record level
addressing: ``load`` reads and parses the complete file and ``save``
rewrites it in full.  Writes go to a temporary file in the same
directory which is then renamed over the target, so a reader sees
either the previous or the new content but never a partial file.

Every store also owns a lock.  Mutating operations wrap their
load‑modify‑save cycle in ``store.transaction()`` so two concurrent
updates handled by the same process cannot overwrite each other.
Coordination between separate processes is not attempted.

``get_store`` is the FastAPI dependency used by the endpoints; it
hands out the store ``create_app`` attached to the application.  Tests
may replace it through ``app.dependency_overrides``, typically with an
``InMemoryStore``.
"""

import copy
import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Protocol, Union

from fastapi import Request

from .errors import StorageCorruptError, StorageUnavailableError


Collection = List[Dict[str, Any]]

logger = logging.getLogger(__name__)


class Store(Protocol):
    """Capability used by the service layer to read and write the collection."""

    def load(self) -> Collection:
        ...

    def save(self, collection: Collection) -> None:
        ...

    def transaction(self):
        ...


class JsonFileStore:
    """Store backed by a single JSON file."""

    def __init__(self, path: Union[str, Path], indent: Optional[int] = None) -> None:
        self.path = Path(path)
        self.indent = indent
        self._lock = threading.Lock()

    def load(self) -> Collection:
        """Read and parse the data file.

        Raises
        ------
        StorageUnavailableError
            If the file is missing or cannot be read.
        StorageCorruptError
            If the content is not valid JSON or not a JSON array.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageUnavailableError(f"Cannot read {self.path}: {exc}") from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageCorruptError(f"{self.path} is not valid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise StorageCorruptError(
                f"{self.path} must contain a JSON array, found {type(data).__name__}"
            )
        return data

    def save(self, collection: Collection) -> None:
        """Serialize ``collection`` and atomically replace the data file."""
        payload = json.dumps(collection, ensure_ascii=False, indent=self.indent)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageUnavailableError(f"Cannot write {self.path}: {exc}") from exc
        logger.debug("Wrote %d mailing lists to %s", len(collection), self.path)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Hold the store lock for a load‑modify‑save cycle."""
        with self._lock:
            yield


class InMemoryStore:
    """Store keeping the collection in memory.

    Loads and saves copy the data, so callers never share objects
    between requests, just as with the file store.
    """

    def __init__(self, initial: Optional[Collection] = None) -> None:
        self._data: Collection = copy.deepcopy(initial) if initial is not None else []
        self._lock = threading.Lock()

    def load(self) -> Collection:
        return copy.deepcopy(self._data)

    def save(self, collection: Collection) -> None:
        self._data = copy.deepcopy(collection)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._lock:
            yield


def init_storage(path: Union[str, Path]) -> None:
    """Create an empty data file if none exists yet.

    Called on application start so the service works on a clean
    checkout.  An existing file is left as it is, even if it is
    corrupt; that is reported on the first request that reads it.
    """
    path = Path(path)
    if path.exists():
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    JsonFileStore(path).save([])
    logger.info("Created empty mailing list file at %s", path)


def get_store(request: Request) -> Store:
    """FastAPI dependency returning the store of the running application.

    ``create_app`` puts one store on ``app.state.store``, so every
    request of that application shares the same file and lock.
    """
    return request.app.state.store
