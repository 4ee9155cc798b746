"""SQL used by the config builders. Every statement binds its parameters."""

# ═══════════════ SITES ═══════════════

SITE = """
    SELECT *, id AS site_id FROM sites
    WHERE id = :site_id AND is_deleted = 0 AND is_public = :is_public
"""

PUBLIC_SITES = """
    SELECT *, id AS site_id FROM sites
    WHERE is_deleted = 0 AND is_public = 1
    ORDER BY id
"""

SITE_MEMBER_CONFIG = "SELECT * FROM site_member_config WHERE site_id = :site_id"

SITE_META = "SELECT * FROM site_meta WHERE site_id = :site_id"

SITE_INFO = "SELECT * FROM site_info WHERE site_id = :site_id"

SITE_INFO_ACTIVE = """
    SELECT * FROM site_info
    WHERE site_id = :site_id AND deleted_at IS NULL
"""

# ═══════════════ THEME ═══════════════

SITE_BLOCK_SETTINGS = "SELECT * FROM site_block_setting WHERE site_id = :site_id"

SITE_STYLE_SETTING = "SELECT * FROM site_style_setting WHERE site_id = :site_id"

TOPIC_BLOCKS = "SELECT * FROM topic_block WHERE topic_id = :topic_id"

TOPIC_CONFIG = "SELECT * FROM topic_config WHERE id = :topic_id"

TOPIC_PAGES = "SELECT * FROM topic_page WHERE topic_id = :topic_id"

TOPIC_STYLES = "SELECT * FROM topic_style WHERE topic_id = :topic_id"

SITE_PAGE_SETTINGS = """
    SELECT sps.*, tp.name AS base_name, tp.path AS base_path
    FROM site_page_setting sps
    JOIN topic_page tp ON tp.id = sps.page_id
    WHERE sps.site_id = :site_id
    ORDER BY sps.sort, sps.id
"""

PAGE_TOP_BLOCKS = """
    SELECT * FROM site_block_setting
    WHERE site_id = :site_id AND page_id = :page_id AND parent_id IS NULL
    ORDER BY sort, id
"""

FEATURE_PRODUCT = """
    SELECT type, main_class, sub_class FROM site_feature_product
    WHERE block_id = :block_id
"""

# ═══════════════ CONTENT ═══════════════

SITE_RULE_LATEST = """
    SELECT * FROM site_rule
    WHERE site_id = :site_id
    ORDER BY id DESC
    LIMIT 1
"""

SITE_CAROUSELS = "SELECT * FROM site_carousel WHERE site_id = :site_id"

SITE_NEWS = "SELECT * FROM site_news WHERE site_id = :site_id"

SITE_SERVICES = "SELECT * FROM site_service WHERE site_id = :site_id"

SITE_TOOLS = "SELECT * FROM site_tool WHERE site_id = :site_id"

SITE_TOOLS_ACTIVE = """
    SELECT * FROM site_tool
    WHERE site_id = :site_id AND deleted_at IS NULL
"""

# ═══════════════ PROMOTION ═══════════════

PROMOTION_ACTIVITIES = "SELECT * FROM site_promotion_activities WHERE site_id = :site_id"

PROMOTION_CONDITIONS = "SELECT * FROM site_promotion_conditions WHERE activity_id = :activity_id"

PROMOTION_COUPONS = "SELECT * FROM site_promotion_coupons WHERE site_id = :site_id"

# ═══════════════ FUNCTION ═══════════════

SHIPPING_SERVICES = "SELECT * FROM site_shipping_services WHERE site_id = :site_id"

PAYMENT_SERVICES = "SELECT * FROM site_payment_services WHERE site_id = :site_id"

SHIPPING_PAYMENT_RELATIONSHIPS = """
    SELECT * FROM site_shipping_payment_relationships WHERE site_id = :site_id
"""

# ═══════════════ PERMISSIONS ═══════════════

PERMISSIONS = "SELECT id, unique_name FROM permissions ORDER BY id"

# ═══════════════ CNAME ═══════════════

CNAME_INSERT = """
    INSERT INTO site_cname (site_id, cname, cvalue)
    VALUES (:site_id, :cname, :cvalue)
"""

CNAME_SELECT = "SELECT * FROM site_cname WHERE site_id = :site_id"

CNAME_UPDATE = """
    UPDATE site_cname SET cvalue = :cvalue
    WHERE site_id = :site_id AND cname = :cname
"""

CNAME_DELETE = "DELETE FROM site_cname WHERE site_id = :site_id AND cname = :cname"

CNAME_COUNT = "SELECT COUNT(*) FROM site_cname WHERE cname = :cname"
