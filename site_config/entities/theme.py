"""Theme config — site and topic styling, site info, news, services and navigation."""

from site_config import queries
from site_config.entities.site import SITE_INFO_FIELDS
from site_config.mapping.fields import BuildContext, Column, Derived, Rows
from site_config.mapping.menu import assemble_blocks, assemble_menu
from site_config.schemas import PageSetting
from site_config.services.config_cache import EntityConfig, RecordSource


def build_menu(ctx: BuildContext) -> list[dict]:
    site_info = ctx.records.get("site_info") or {}
    return assemble_menu(
        ctx.records.get("site_page_setting") or [],
        ecommerce_enabled=ctx.site.get("set_ecommerce"),
        site_type=site_info.get("site_type"),
    )


def build_blocks(ctx: BuildContext) -> dict[str, list[dict]]:
    def fetch_blocks(page: PageSetting) -> list[dict]:
        return ctx.fetcher.fetch_all(
            queries.PAGE_TOP_BLOCKS, {"site_id": ctx.site_id, "page_id": page.page_id},
        )

    def fetch_feature(block: dict) -> dict | None:
        return ctx.fetcher.fetch_one(queries.FEATURE_PRODUCT, {"block_id": block.get("id")})

    return assemble_blocks(ctx.records.get("site_page_setting") or [], fetch_blocks, fetch_feature)


THEME = EntityConfig(
    kind="theme",
    sources=(
        RecordSource("site_block_setting", queries.SITE_BLOCK_SETTINGS),
        RecordSource("site_style_setting", queries.SITE_STYLE_SETTING, single=True),
        RecordSource("site_tool", queries.SITE_TOOLS),
        RecordSource("topic_block", queries.TOPIC_BLOCKS, param="topic_id"),
        RecordSource("topic_config", queries.TOPIC_CONFIG, param="topic_id", single=True),
        RecordSource("topic_page", queries.TOPIC_PAGES, param="topic_id"),
        RecordSource("topic_style", queries.TOPIC_STYLES, param="topic_id"),
        RecordSource("site_info", queries.SITE_INFO, single=True),
        RecordSource("site_news", queries.SITE_NEWS),
        RecordSource("site_service", queries.SITE_SERVICES),
        RecordSource("site_page_setting", queries.SITE_PAGE_SETTINGS),
    ),
    fields=(
        Rows("site_block_setting", "site_block_setting"),
        Column("site_style_setting_id", "site_style_setting", "id"),
        Column("font", "site_style_setting"),
        Column("color", "site_style_setting"),
        Column("header", "site_style_setting"),
        Column("footer", "site_style_setting"),
        Rows("site_tool", "site_tool"),
        Rows("topic_block", "topic_block"),
        Column("topic_name", "topic_config"),
        Column("topic_icon", "topic_config"),
        Column("topic_description", "topic_config"),
        Column("topic_type", "topic_config"),
        Column("activate", "topic_config"),
        Column("default_topic", "topic_config"),
        Rows("topic_page", "topic_page"),
        Rows("topic_style", "topic_style"),
        # site_type comes from site_info, not topic_config
        *SITE_INFO_FIELDS,
        Rows("site_service", "site_service"),
        Rows("site_news", "site_news"),
        Derived("menu", build_menu),
        Derived("blocks", build_blocks),
    ),
    file_name="{site_code}-theme.json",
    needs_topic=True,
)
