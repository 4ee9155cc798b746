from site_config.mapping.fields import (
    AssetUrl,
    BuildContext,
    Column,
    Derived,
    Record,
    Rows,
    build_asset_url,
    field_with_default,
    map_fields,
)

__all__ = [
    "AssetUrl",
    "BuildContext",
    "Column",
    "Derived",
    "Record",
    "Rows",
    "build_asset_url",
    "field_with_default",
    "map_fields",
]
