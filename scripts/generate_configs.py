#!/usr/bin/env python3
"""Regenerate site config documents from the database.

Usage:
  python scripts/generate_configs.py 12 15 --topic-id 3
  python scripts/generate_configs.py 12 --kind info --kind news
  python scripts/generate_configs.py --permissions --lookups

Sites are processed one after another; a store failure stops the batch.
"""

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def ok(msg: str) -> None:
    print(f"  ✅ {msg}")


def fail(msg: str) -> None:
    print(f"  ❌ {msg}")


def info(msg: str) -> None:
    print(f"  ℹ️  {msg}")


def parse_args(argv=None) -> argparse.Namespace:
    from site_config.entities import SITE_KINDS

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("site_ids", nargs="*", type=int, help="site ids to regenerate")
    parser.add_argument("--kind", action="append", choices=SITE_KINDS,
                        help="config kind (repeatable, default: all)")
    parser.add_argument("--topic-id", type=int, help="topic id, required for the theme config")
    parser.add_argument("--private", action="store_true", help="build non-public sites")
    parser.add_argument("--permissions", action="store_true", help="also regenerate permissions.json")
    parser.add_argument("--lookups", action="store_true", help="also refresh site/domain lookups")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    from site_config.config import settings
    from site_config.database import session_factory
    from site_config.entities import SITE_KINDS, get_entity
    from site_config.errors import StoreError
    from site_config.services.config_cache import ConfigCache
    from site_config.services.config_store import ConfigFileHandler
    from site_config.services.row_fetcher import RowFetcher
    from site_config.services.site_lookup import INDEX_FILES, SiteLookup

    args = parse_args(argv)
    kinds = args.kind or list(SITE_KINDS)
    is_public = 0 if args.private else 1
    handler = ConfigFileHandler(settings.config_path)
    failures = 0

    print(f"\n🗂  Site configs → {settings.config_path}")
    print("=" * 60)

    with session_factory() as session:
        fetcher = RowFetcher(session)
        cache = ConfigCache(fetcher, handler)
        lookup = SiteLookup(fetcher, handler)
        try:
            if args.permissions:
                if cache.write(get_entity("permissions")):
                    ok("permissions")
                else:
                    fail("permissions")
                    failures += 1

            for site_id in args.site_ids:
                for kind in kinds:
                    entity = get_entity(kind)
                    if entity.needs_topic and args.topic_id is None:
                        info(f"site {site_id} | {kind}: skipped (needs --topic-id)")
                        continue
                    if cache.write(entity, site_id=site_id, topic_id=args.topic_id, is_public=is_public):
                        ok(f"site {site_id} | {kind}")
                    else:
                        fail(f"site {site_id} | {kind}")
                        failures += 1

                if args.lookups:
                    for index in INDEX_FILES:
                        if lookup.set_site(site_id, is_public, index):
                            ok(f"site {site_id} | {index} lookup")
                        else:
                            info(f"site {site_id} | {index} lookup: not indexed")
        except StoreError as e:
            fail(f"Store error: {e}")
            return 2

    print(f"\n{'All configs written.' if not failures else f'{failures} config(s) failed.'}")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
