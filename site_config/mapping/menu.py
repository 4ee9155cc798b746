"""Menu and block assembly for the site navigation.

Pages come from site_page_setting joined with topic_page: each row carries a
sort key, a visibility status and a custom name/path that overrides the
topic's base name/path.
"""

import logging
from typing import Callable, Iterable

from site_config.schemas import FeatureSelection, MenuItem, PageSetting

logger = logging.getLogger(__name__)

VISIBLE = 1
COMMERCE_SITE_TYPE = 2
FEATURE_PRODUCT = "feature_product"

# Custom values that mean "keep the base value"
_NO_OVERRIDE = (None, "", "_")

LOGIN_ITEM = MenuItem(name="login", path="/login")
CART_ITEM = MenuItem(name="shopping_cart", path="/shopping_cart")


def _as_int(value, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _override(custom: str | None, base: str | None) -> str:
    return (base or "") if custom in _NO_OVERRIDE else custom


def resolve_page(page: PageSetting) -> MenuItem:
    return MenuItem(
        name=_override(page.custom_name, page.base_name),
        path=_override(page.custom_path, page.base_path),
    )


def _sorted_pages(pages: Iterable[dict]) -> list[PageSetting]:
    settings = [PageSetting.model_validate(p) for p in pages]
    seen: set[int] = set()
    for page in settings:
        sort = _as_int(page.sort)
        if sort in seen:
            logger.warning("Duplicate page sort key | sort=%d | page_id=%s", sort, page.id)
        seen.add(sort)
    # NULL sorts as 0; sorted() is stable so pages sharing a key keep source order
    return sorted(settings, key=lambda p: _as_int(p.sort))


def is_commerce(ecommerce_enabled, site_type) -> bool:
    return bool(_as_int(ecommerce_enabled)) or _as_int(site_type, -1) == COMMERCE_SITE_TYPE


def assemble_menu(pages: Iterable[dict], ecommerce_enabled=False, site_type=None) -> list[dict]:
    """Visible pages ordered by sort key, then login, then the cart for commerce sites."""
    menu = [resolve_page(p) for p in _sorted_pages(pages) if p.status == VISIBLE]
    menu.append(LOGIN_ITEM)
    if is_commerce(ecommerce_enabled, site_type):
        menu.append(CART_ITEM)
    return [item.model_dump() for item in menu]


def feature_selection(record: dict | None) -> dict:
    """Feature-product filter for a block, falling back to the latest products."""
    if not record:
        return FeatureSelection().model_dump()
    return FeatureSelection.model_validate(
        {k: v for k, v in record.items() if v is not None}
    ).model_dump()


def assemble_blocks(
    pages: Iterable[dict],
    fetch_blocks: Callable[[PageSetting], list[dict]],
    fetch_feature: Callable[[dict], dict | None],
) -> dict[str, list[dict]]:
    """Top-level blocks of every page, grouped by resolved page path and ordered by sort."""
    grouped: dict[str, list[dict]] = {}
    for page in _sorted_pages(pages):
        blocks = []
        for block in fetch_blocks(page):
            block = dict(block)
            if block.get("block_type") == FEATURE_PRODUCT:
                block["feature"] = feature_selection(fetch_feature(block))
            blocks.append(block)
        path = resolve_page(page).path
        grouped.setdefault(path, []).extend(blocks)

    for blocks in grouped.values():
        blocks.sort(key=lambda b: _as_int(b.get("sort")))
    return grouped
