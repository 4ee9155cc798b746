"""Site-level configs — the site row itself, site info and site functions."""

from site_config import queries
from site_config.mapping.fields import AssetUrl, Column, Record, Rows
from site_config.services.config_cache import EntityConfig, RecordSource

SITE_INFO_FIELDS = (
    Column("site_type", "site_info"),
    Column("currency", "site_info"),
    AssetUrl("logo", "site_info", prefix="logo/"),
    Column("contact_phone", "site_info"),
    Column("contact_email", "site_info"),
    Column("contact_location", "site_info"),
    Column("google_map_status", "site_info"),
    AssetUrl("site_introdution_image", "site_info"),
    Column("site_introduction_text", "site_info"),
    Column("contact_time", "site_info"),
    Column("fb_link", "site_info"),
    Column("line_link", "site_info"),
    Column("instagram_link", "site_info"),
    Column("youtube_link", "site_info"),
    Column("twitter_link", "site_info"),
    Column("tiktok_link", "site_info"),
    Column("deleted_at", "site_info"),
)


SITE = EntityConfig(
    kind="site",
    sources=(
        RecordSource("site_member_config", queries.SITE_MEMBER_CONFIG, single=True),
        RecordSource("site_meta", queries.SITE_META, single=True),
    ),
    fields=(
        Record("site", "site"),
        Record("site_member_config", "site_member_config"),
        Record("site_meta", "site_meta"),
    ),
    file_name="{site_code}.json",
)


INFO = EntityConfig(
    kind="info",
    sources=(
        RecordSource("site_info", queries.SITE_INFO_ACTIVE, single=True),
    ),
    fields=SITE_INFO_FIELDS,
    file_name="{site_code}-info.json",
)


FUNCTION = EntityConfig(
    kind="function",
    sources=(
        RecordSource("shipping_services", queries.SHIPPING_SERVICES),
        RecordSource("payment_services", queries.PAYMENT_SERVICES),
        RecordSource("shipping_payment_relationships", queries.SHIPPING_PAYMENT_RELATIONSHIPS),
    ),
    fields=(
        # Feature switches stored on the sites row
        Column("set_fbe", "site"),
        Column("set_cs_btn", "site"),
        Column("set_g_search", "site"),
        Column("set_tracking_code", "site"),
        Rows("shipping_services", "shipping_services"),
        Rows("payment_services", "payment_services"),
        Rows("shipping_payment_relationships", "shipping_payment_relationships"),
    ),
    file_name="{site_code}-function.json",
)
