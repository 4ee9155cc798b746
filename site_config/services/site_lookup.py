"""Site lookup — resolve a request's site code or domain to its site.

Two indexes are maintained:
  - site   (site-lookup.json):   keyed by site_code
  - domain (domain-lookup.json): keyed by sha256(domain)
"""

import logging

from site_config import queries
from site_config.errors import InvalidArgumentError
from site_config.schemas import LookupEntry
from site_config.services.config_store import ConfigFileHandler
from site_config.services.lookup_index import LookupIndex, domain_key
from site_config.services.row_fetcher import RowFetcher

logger = logging.getLogger(__name__)

INDEX_FILES = {
    "site": "site-lookup.json",
    "domain": "domain-lookup.json",
}


def entry_key(entry: LookupEntry, index: str) -> str | None:
    """Index key for a lookup entry, None when the site cannot be indexed there."""
    if index == "domain":
        return domain_key(entry.domain) if entry.domain else None
    return entry.site_code or None


class SiteLookup:
    """Bootstrap, update and query the site / domain lookup indexes."""

    def __init__(self, fetcher: RowFetcher, handler: ConfigFileHandler):
        self.fetcher = fetcher
        self.handler = handler

    def index(self, index: str) -> LookupIndex:
        if index not in INDEX_FILES:
            raise InvalidArgumentError(f"Unknown lookup index: {index!r}")
        return LookupIndex(self.handler, INDEX_FILES[index])

    def _public_entries(self, index: str):
        for row in self.fetcher.fetch_all(queries.PUBLIC_SITES):
            entry = LookupEntry.from_site(row)
            key = entry_key(entry, index)
            if key is not None:
                yield key, entry.model_dump()

    def bootstrap(self, index: str = "site") -> bool:
        """Create the index from all public sites, unless it already exists."""
        return self.index(index).bootstrap_if_absent(lambda: list(self._public_entries(index)))

    def set_site(self, site_id: int, is_public: int = 1, index: str = "site") -> bool:
        """Add or refresh one site's entry. False when the site is missing or has no key."""
        self.bootstrap(index)
        site = self.fetcher.fetch_one(queries.SITE, {"site_id": site_id, "is_public": is_public})
        if not site:
            logger.info("Lookup SKIP | index=%s | site_id=%s | site not found", index, site_id)
            return False

        entry = LookupEntry.from_site(site)
        key = entry_key(entry, index)
        if key is None:
            logger.info("Lookup SKIP | index=%s | site_id=%s | no key", index, site_id)
            return False

        lookup = self.index(index)
        # A renamed site or moved domain must not leave its old key behind
        stale = [k for k, v in lookup.load().items() if v.get("site_id") == site_id and k != key]
        return lookup.upsert(key, entry.model_dump(), replaces=stale)

    def remove_site(self, site_id: int, index: str = "site") -> bool:
        """Drop every entry for a site. False, with the file untouched, when none exist."""
        lookup = self.index(index)
        keys = [k for k, v in lookup.load().items() if v.get("site_id") == site_id]
        if not keys:
            return False
        for key in keys:
            lookup.remove(key)
        logger.info("Lookup REMOVE | index=%s | site_id=%s | keys=%d", index, site_id, len(keys))
        return True

    def is_site_in(self, site_id: int, index: str = "site") -> bool:
        return any(v.get("site_id") == site_id for v in self.index(index).load().values())

    def find(self, value: str, index: str = "site") -> dict | None:
        """Entry for a site code (site index) or a raw domain (domain index)."""
        key = domain_key(value) if index == "domain" else value
        return self.index(index).get(key)
