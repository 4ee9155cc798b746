"""CRUD over the site_cname table (custom domain records)."""

import logging

from site_config import queries
from site_config.services.row_fetcher import RowFetcher

logger = logging.getLogger(__name__)


class SiteCname:
    def __init__(self, fetcher: RowFetcher):
        self.fetcher = fetcher

    def create(self, site_id: int, cname: str, cvalue: str) -> bool:
        count = self.fetcher.execute(
            queries.CNAME_INSERT, {"site_id": site_id, "cname": cname, "cvalue": cvalue},
        )
        logger.info("CNAME create | site_id=%s | cname=%s", site_id, cname)
        return count > 0

    def read(self, site_id: int) -> list[dict]:
        return self.fetcher.fetch_all(queries.CNAME_SELECT, {"site_id": site_id})

    def update(self, site_id: int, cname: str, cvalue: str) -> bool:
        count = self.fetcher.execute(
            queries.CNAME_UPDATE, {"site_id": site_id, "cname": cname, "cvalue": cvalue},
        )
        return count > 0

    def delete(self, site_id: int, cname: str) -> bool:
        count = self.fetcher.execute(queries.CNAME_DELETE, {"site_id": site_id, "cname": cname})
        if count:
            logger.info("CNAME delete | site_id=%s | cname=%s", site_id, cname)
        return count > 0

    def check_cname(self, cname: str) -> bool:
        """True when any site already uses this cname."""
        return (self.fetcher.scalar(queries.CNAME_COUNT, {"cname": cname}) or 0) > 0
