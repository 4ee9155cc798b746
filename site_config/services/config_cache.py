"""ConfigCache — the one engine behind every generated site config.

An EntityConfig declares which record sets to fetch, how to flatten them and
where the document lives. The engine runs those steps for one site:

  site row → record sources → field mappings → <config_path>/<file name>

A missing (or non-public / deleted) site row aborts the write; a missing
joined record only contributes fallback values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from site_config import queries
from site_config.config import settings
from site_config.mapping.fields import BuildContext, map_fields
from site_config.services.config_store import ConfigFileHandler
from site_config.services.row_fetcher import RowFetcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordSource:
    """One query feeding a config. `param` names the context key bound to the query."""
    name: str
    sql: str
    param: str | None = "site_id"
    single: bool = False
    enrich: Callable[[RowFetcher, list[dict]], list[dict]] | None = None

    def params(self, ctx: BuildContext) -> dict[str, Any]:
        if self.param is None:
            return {}
        return {self.param: getattr(ctx, self.param)}


@dataclass(frozen=True)
class EntityConfig:
    """Queries, field mappings and output file name for one kind of config."""
    kind: str
    sources: tuple[RecordSource, ...]
    fields: tuple
    file_name: str = "{site_code}.json"
    requires_site: bool = True
    needs_topic: bool = False

    def file_for(self, site_code: str | None = None) -> str:
        return self.file_name.format(site_code=site_code or "")


class ConfigCache:
    """Build, write, read and check generated config documents."""

    def __init__(
        self,
        fetcher: RowFetcher,
        handler: ConfigFileHandler,
        image_base_url: str | None = None,
    ):
        self.fetcher = fetcher
        self.handler = handler
        self.image_base_url = settings.image_base_url if image_base_url is None else image_base_url

    def get_site(self, site_id: int, is_public: int = 1) -> dict | None:
        """The owning site row, if it exists, is not deleted and matches `is_public`."""
        return self.fetcher.fetch_one(queries.SITE, {"site_id": site_id, "is_public": is_public})

    def _fetch(self, source: RecordSource, ctx: BuildContext):
        params = source.params(ctx)
        if source.single:
            return self.fetcher.fetch_one(source.sql, params)
        rows = self.fetcher.fetch_all(source.sql, params)
        if source.enrich is not None:
            rows = source.enrich(self.fetcher, rows)
        return rows

    def build(
        self,
        entity: EntityConfig,
        site_id: int | None = None,
        topic_id: int | None = None,
        is_public: int = 1,
    ) -> tuple[dict, dict] | None:
        """Fetch and flatten. Returns (site row, mapping), or None when the site is missing."""
        ctx = BuildContext(
            fetcher=self.fetcher,
            site_id=site_id,
            topic_id=topic_id,
            is_public=is_public,
            image_base_url=self.image_base_url,
        )
        if entity.requires_site:
            site = self.get_site(site_id, is_public)
            if not site:
                logger.info(
                    "Config SKIP | kind=%s | site_id=%s | site not found or not public",
                    entity.kind, site_id,
                )
                return None
            ctx.site = site
            ctx.records["site"] = site

        for source in entity.sources:
            ctx.records[source.name] = self._fetch(source, ctx)

        return ctx.site, map_fields(entity.fields, ctx)

    def write(
        self,
        entity: EntityConfig,
        site_id: int | None = None,
        topic_id: int | None = None,
        is_public: int = 1,
    ) -> bool:
        """Regenerate one config document. StoreError propagates to the caller."""
        if entity.needs_topic and topic_id is None:
            logger.warning("Config SKIP | kind=%s | site_id=%s | topic_id required", entity.kind, site_id)
            return False

        built = self.build(entity, site_id=site_id, topic_id=topic_id, is_public=is_public)
        if built is None:
            return False
        site, data = built
        if entity.requires_site and not site.get("site_code"):
            logger.warning("Config SKIP | kind=%s | site_id=%s | site has no site_code", entity.kind, site_id)
            return False

        name = entity.file_for(site.get("site_code"))
        ok = self.handler.write(name, data)
        logger.info("Config %s | kind=%s | site_id=%s | file=%s",
                    "BUILT" if ok else "FAILED", entity.kind, site_id, name)
        return ok

    def read(self, entity: EntityConfig, site_code: str | None = None) -> dict:
        """Cached document for a site, {} when it was never generated."""
        return self.handler.read(entity.file_for(site_code))

    def exists(self, entity: EntityConfig, site_code: str | None = None) -> bool:
        return self.handler.exists(entity.file_for(site_code))

    def remove(self, entity: EntityConfig, site_code: str | None = None) -> bool:
        return self.handler.remove(entity.file_for(site_code))
