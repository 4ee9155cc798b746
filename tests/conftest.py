"""Shared test fixtures and configuration."""

import os

import pytest

# Never reach a real database during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

from sqlalchemy import create_engine, text  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from site_config.services.config_cache import ConfigCache  # noqa: E402
from site_config.services.config_store import ConfigFileHandler  # noqa: E402
from site_config.services.row_fetcher import RowFetcher  # noqa: E402

IMAGE_BASE = "https://img.example.com/site/store/"

SCHEMA = [
    """CREATE TABLE sites (
        id INTEGER PRIMARY KEY, site_code TEXT, name TEXT, domain TEXT, file_path TEXT,
        is_deleted INTEGER DEFAULT 0, is_public INTEGER DEFAULT 1,
        set_fbe INTEGER, set_cs_btn INTEGER, set_g_search INTEGER, set_tracking_code TEXT,
        set_ecommerce INTEGER DEFAULT 0)""",
    "CREATE TABLE site_member_config (id INTEGER PRIMARY KEY, site_id INTEGER, allow_register INTEGER)",
    "CREATE TABLE site_meta (id INTEGER PRIMARY KEY, site_id INTEGER, title TEXT, description TEXT)",
    """CREATE TABLE site_info (
        id INTEGER PRIMARY KEY, site_id INTEGER, site_type INTEGER, currency TEXT, logo TEXT,
        contact_phone TEXT, contact_email TEXT, contact_location TEXT, google_map_status INTEGER,
        site_introdution_image TEXT, site_introduction_text TEXT, contact_time TEXT,
        fb_link TEXT, line_link TEXT, instagram_link TEXT, youtube_link TEXT,
        twitter_link TEXT, tiktok_link TEXT, deleted_at TEXT)""",
    """CREATE TABLE site_block_setting (
        id INTEGER PRIMARY KEY, site_id INTEGER, page_id INTEGER, parent_id INTEGER,
        block_type TEXT, sort INTEGER)""",
    """CREATE TABLE site_style_setting (
        id INTEGER PRIMARY KEY, site_id INTEGER, font TEXT, color TEXT, header TEXT, footer TEXT)""",
    "CREATE TABLE site_tool (id INTEGER PRIMARY KEY, site_id INTEGER, name TEXT, deleted_at TEXT)",
    "CREATE TABLE topic_block (id INTEGER PRIMARY KEY, topic_id INTEGER, name TEXT)",
    """CREATE TABLE topic_config (
        id INTEGER PRIMARY KEY, topic_name TEXT, topic_icon TEXT, topic_description TEXT,
        topic_type TEXT, site_type INTEGER, activate INTEGER, default_topic INTEGER)""",
    "CREATE TABLE topic_page (id INTEGER PRIMARY KEY, topic_id INTEGER, name TEXT, path TEXT)",
    "CREATE TABLE topic_style (id INTEGER PRIMARY KEY, topic_id INTEGER, name TEXT)",
    """CREATE TABLE site_page_setting (
        id INTEGER PRIMARY KEY, site_id INTEGER, page_id INTEGER, sort INTEGER, status INTEGER,
        custom_name TEXT, custom_path TEXT)""",
    """CREATE TABLE site_feature_product (
        id INTEGER PRIMARY KEY, block_id INTEGER, type TEXT, main_class INTEGER, sub_class INTEGER)""",
    "CREATE TABLE site_rule (id INTEGER PRIMARY KEY, site_id INTEGER, content TEXT)",
    "CREATE TABLE site_carousel (id INTEGER PRIMARY KEY, site_id INTEGER, image TEXT)",
    "CREATE TABLE site_news (id INTEGER PRIMARY KEY, site_id INTEGER, title TEXT)",
    "CREATE TABLE site_service (id INTEGER PRIMARY KEY, site_id INTEGER, title TEXT)",
    "CREATE TABLE site_promotion_activities (id INTEGER PRIMARY KEY, site_id INTEGER, name TEXT)",
    "CREATE TABLE site_promotion_conditions (id INTEGER PRIMARY KEY, activity_id INTEGER, threshold INTEGER)",
    "CREATE TABLE site_promotion_coupons (id INTEGER PRIMARY KEY, site_id INTEGER, code TEXT)",
    "CREATE TABLE site_shipping_services (id INTEGER PRIMARY KEY, site_id INTEGER, name TEXT)",
    "CREATE TABLE site_payment_services (id INTEGER PRIMARY KEY, site_id INTEGER, name TEXT)",
    """CREATE TABLE site_shipping_payment_relationships (
        id INTEGER PRIMARY KEY, site_id INTEGER, shipping_id INTEGER, payment_id INTEGER)""",
    "CREATE TABLE permissions (id INTEGER PRIMARY KEY, unique_name TEXT, description TEXT)",
    """CREATE TABLE site_cname (
        id INTEGER PRIMARY KEY AUTOINCREMENT, site_id INTEGER, cname TEXT, cvalue TEXT)""",
]

SEED = {
    "sites": [
        # 1: public shop with a domain
        {"id": 1, "site_code": "alpha", "name": "alpha-shop", "domain": "alpha.example.com",
         "file_path": "/srv/alpha", "is_deleted": 0, "is_public": 1, "set_fbe": 1,
         "set_cs_btn": 0, "set_g_search": 1, "set_tracking_code": "UA-1", "set_ecommerce": 0},
        # 2: public, no domain, no site_info row, e-commerce enabled
        {"id": 2, "site_code": "beta", "name": "beta-shop", "domain": None,
         "file_path": "/srv/beta", "is_deleted": 0, "is_public": 1, "set_fbe": None,
         "set_cs_btn": None, "set_g_search": None, "set_tracking_code": None, "set_ecommerce": 1},
        # 3: private
        {"id": 3, "site_code": "gamma", "name": "gamma-shop", "domain": "gamma.example.com",
         "file_path": "/srv/gamma", "is_deleted": 0, "is_public": 0, "set_fbe": 0,
         "set_cs_btn": 0, "set_g_search": 0, "set_tracking_code": None, "set_ecommerce": 0},
        # 4: deleted
        {"id": 4, "site_code": "delta", "name": "delta-shop", "domain": "delta.example.com",
         "file_path": "/srv/delta", "is_deleted": 1, "is_public": 1, "set_fbe": 0,
         "set_cs_btn": 0, "set_g_search": 0, "set_tracking_code": None, "set_ecommerce": 0},
    ],
    "site_member_config": [{"id": 1, "site_id": 1, "allow_register": 1}],
    "site_meta": [{"id": 1, "site_id": 1, "title": "Alpha", "description": "Alpha shop"}],
    "site_info": [
        {"id": 1, "site_id": 1, "site_type": 1, "currency": "TWD", "logo": "logo.png",
         "contact_phone": "02-1234", "contact_email": "hi@alpha.example.com",
         "contact_location": "Taipei", "google_map_status": 1, "site_introdution_image": None,
         "site_introduction_text": "About alpha", "contact_time": "9-18", "fb_link": "fb/alpha",
         "line_link": None, "instagram_link": None, "youtube_link": None, "twitter_link": None,
         "tiktok_link": None, "deleted_at": None},
        {"id": 3, "site_id": 3, "site_type": 2, "currency": "JPY", "logo": None,
         "contact_phone": None, "contact_email": None, "contact_location": None,
         "google_map_status": 0, "site_introdution_image": "intro.jpg",
         "site_introduction_text": None, "contact_time": None, "fb_link": None, "line_link": None,
         "instagram_link": None, "youtube_link": None, "twitter_link": None, "tiktok_link": None,
         "deleted_at": None},
    ],
    "site_block_setting": [
        {"id": 1, "site_id": 1, "page_id": 100, "parent_id": None, "block_type": "banner", "sort": 2},
        {"id": 2, "site_id": 1, "page_id": 100, "parent_id": None, "block_type": "feature_product", "sort": 1},
        {"id": 3, "site_id": 1, "page_id": 100, "parent_id": 1, "block_type": "text", "sort": 1},
        {"id": 4, "site_id": 1, "page_id": 101, "parent_id": None, "block_type": "feature_product", "sort": 1},
    ],
    "site_style_setting": [
        {"id": 7, "site_id": 1, "font": "serif", "color": "#fff", "header": "h1", "footer": "f1"},
    ],
    "site_tool": [
        {"id": 1, "site_id": 1, "name": "chat", "deleted_at": None},
        {"id": 2, "site_id": 1, "name": "old-chat", "deleted_at": "2024-01-01"},
    ],
    "topic_block": [{"id": 1, "topic_id": 10, "name": "hero"}],
    "topic_config": [
        {"id": 10, "topic_name": "Classic", "topic_icon": "classic.png", "topic_description": None,
         "topic_type": "shop", "site_type": 9, "activate": 1, "default_topic": 0},
    ],
    "topic_page": [
        {"id": 100, "topic_id": 10, "name": "Home", "path": "/"},
        {"id": 101, "topic_id": 10, "name": "About", "path": "/about"},
        {"id": 102, "topic_id": 10, "name": "Shop", "path": "/shop"},
    ],
    "topic_style": [{"id": 1, "topic_id": 10, "name": "light"}],
    "site_page_setting": [
        {"id": 1, "site_id": 1, "page_id": 101, "sort": 2, "status": 1, "custom_name": "_", "custom_path": None},
        {"id": 2, "site_id": 1, "page_id": 100, "sort": 1, "status": 1, "custom_name": "Home!", "custom_path": None},
        {"id": 3, "site_id": 1, "page_id": 102, "sort": 3, "status": 0, "custom_name": None, "custom_path": None},
        {"id": 4, "site_id": 2, "page_id": 100, "sort": 1, "status": 1, "custom_name": None, "custom_path": "/home"},
    ],
    "site_feature_product": [{"id": 1, "block_id": 2, "type": "hot", "main_class": 3, "sub_class": 7}],
    "site_rule": [
        {"id": 1, "site_id": 1, "content": "old rules"},
        {"id": 2, "site_id": 1, "content": "new rules"},
    ],
    "site_carousel": [
        {"id": 1, "site_id": 1, "image": "a.jpg"},
        {"id": 2, "site_id": 1, "image": "b.jpg"},
    ],
    "site_news": [{"id": 1, "site_id": 1, "title": "Grand opening"}],
    "site_service": [{"id": 1, "site_id": 1, "title": "Delivery"}],
    "site_promotion_activities": [
        {"id": 1, "site_id": 1, "name": "Spring sale"},
        {"id": 2, "site_id": 1, "name": "Members day"},
    ],
    "site_promotion_conditions": [
        {"id": 1, "activity_id": 1, "threshold": 1000},
        {"id": 2, "activity_id": 1, "threshold": 2000},
    ],
    "site_promotion_coupons": [{"id": 1, "site_id": 1, "code": "SPRING10"}],
    "site_shipping_services": [{"id": 1, "site_id": 1, "name": "home delivery"}],
    "site_payment_services": [{"id": 1, "site_id": 1, "name": "credit card"}],
    "site_shipping_payment_relationships": [{"id": 1, "site_id": 1, "shipping_id": 1, "payment_id": 1}],
    "permissions": [
        {"id": 1, "unique_name": "site.edit", "description": "Edit site"},
        {"id": 2, "unique_name": "site.publish", "description": "Publish site"},
    ],
    "site_cname": [{"id": 1, "site_id": 1, "cname": "www.alpha.example.com", "cvalue": "alpha.holkee.com"}],
}


def _insert(conn, table: str, rows: list[dict]):
    columns = list(rows[0])
    sql = (
        f"INSERT INTO {table} ({', '.join(columns)}) "
        f"VALUES ({', '.join(':' + c for c in columns)})"
    )
    conn.execute(text(sql), rows)


@pytest.fixture
def engine():
    """Fresh in-memory database with the site schema and seed rows."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    with eng.begin() as conn:
        for stmt in SCHEMA:
            conn.execute(text(stmt))
        for table, rows in SEED.items():
            _insert(conn, table, rows)
    yield eng
    eng.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture
def fetcher(session):
    return RowFetcher(session)


@pytest.fixture
def handler(tmp_path):
    return ConfigFileHandler(tmp_path / "config")


@pytest.fixture
def cache(fetcher, handler):
    return ConfigCache(fetcher, handler, image_base_url=IMAGE_BASE)


@pytest.fixture
def currency_config(tmp_path):
    path = tmp_path / "currency.json"
    path.write_text('{"JPY": 2, "TWD": 0, "USD": -2}', encoding="utf-8")
    return str(path)
