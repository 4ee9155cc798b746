"""Content configs — one table each, passed through as record lists."""

from site_config import queries
from site_config.mapping.fields import Record, Rows
from site_config.services.config_cache import EntityConfig, RecordSource

RULE = EntityConfig(
    kind="rule",
    sources=(RecordSource("site_rule", queries.SITE_RULE_LATEST, single=True),),
    fields=(Record("site_rule", "site_rule"),),
    file_name="{site_code}-rule.json",
)

CAROUSEL = EntityConfig(
    kind="carousel",
    sources=(RecordSource("site_carousel", queries.SITE_CAROUSELS),),
    fields=(Rows("site_carousel", "site_carousel"),),
    file_name="{site_code}-carousel.json",
)

NEWS = EntityConfig(
    kind="news",
    sources=(RecordSource("site_news", queries.SITE_NEWS),),
    fields=(Rows("site_news", "site_news"),),
    file_name="{site_code}-news.json",
)

SERVICE = EntityConfig(
    kind="service",
    sources=(RecordSource("site_service", queries.SITE_SERVICES),),
    fields=(Rows("site_service", "site_service"),),
    file_name="{site_code}-service.json",
)

TOOL = EntityConfig(
    kind="tool",
    sources=(RecordSource("site_tool", queries.SITE_TOOLS_ACTIVE),),
    fields=(Rows("site_tool", "site_tool"),),
    file_name="{site_code}-tool.json",
)
