"""Lookup index — one shared document mapping many keys to summary records.

There is no locking: concurrent writers to the same index race and the last
write wins. Callers serialize updates per index file.
"""

import hashlib
import logging
from typing import Callable, Iterable

from site_config.services.config_store import ConfigFileHandler

logger = logging.getLogger(__name__)


def domain_key(domain: str) -> str:
    """Index key for a domain — sha256 hex digest, so file content stays key-safe."""
    return hashlib.sha256(domain.strip().lower().encode()).hexdigest()


class LookupIndex:
    """Keyed add / update / remove over a single config document."""

    def __init__(self, handler: ConfigFileHandler, file_name: str):
        self.handler = handler
        self.file_name = file_name

    def exists(self) -> bool:
        return self.handler.exists(self.file_name)

    def load(self) -> dict:
        return self.handler.read(self.file_name)

    def get(self, key: str) -> dict | None:
        return self.load().get(str(key))

    def contains(self, key: str) -> bool:
        return str(key) in self.load()

    def bootstrap_if_absent(self, load_entries: Callable[[], Iterable[tuple[str, dict]]]) -> bool:
        """Populate the index from the full source list, only if the file is absent.

        Returns True when the index was created by this call.
        """
        if self.exists():
            return False
        data = {str(key): value for key, value in load_entries()}
        ok = self.handler.write(self.file_name, data)
        if ok:
            logger.info("Lookup BOOTSTRAP | file=%s | entries=%d", self.file_name, len(data))
        return ok

    def upsert(self, key: str, value: dict, replaces: Iterable[str] = ()) -> bool:
        """Set one entry, dropping the keys in `replaces` in the same write."""
        data = self.load()
        for old in replaces:
            data.pop(str(old), None)
        data[str(key)] = value
        return self.handler.write(self.file_name, data)

    def remove(self, key: str) -> bool:
        """Drop one entry. Returns False, leaving the file untouched, if the key is missing."""
        data = self.load()
        if str(key) not in data:
            return False
        del data[str(key)]
        return self.handler.write(self.file_name, data)
