"""Promotion config — activities with their conditions, plus coupons."""

from site_config import queries
from site_config.mapping.fields import Rows
from site_config.services.config_cache import EntityConfig, RecordSource
from site_config.services.row_fetcher import RowFetcher


def attach_conditions(fetcher: RowFetcher, activities: list[dict]) -> list[dict]:
    """Give every activity a `conditions` list fetched by its id."""
    for activity in activities:
        activity["conditions"] = fetcher.fetch_all(
            queries.PROMOTION_CONDITIONS, {"activity_id": activity["id"]},
        )
    return activities


PROMOTION = EntityConfig(
    kind="promotion",
    sources=(
        RecordSource("activities", queries.PROMOTION_ACTIVITIES, enrich=attach_conditions),
        RecordSource("coupons", queries.PROMOTION_COUPONS),
    ),
    fields=(
        Rows("activities", "activities"),
        Rows("coupons", "coupons"),
    ),
    file_name="{site_code}-promotion.json",
)
