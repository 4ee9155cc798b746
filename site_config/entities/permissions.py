"""Permissions config — global, not tied to a site."""

from site_config import queries
from site_config.mapping.fields import BuildContext, Derived
from site_config.services.config_cache import EntityConfig, RecordSource


def permission_list(ctx: BuildContext) -> list[dict]:
    return [
        {"id": row["id"], "unique_name": row["unique_name"]}
        for row in ctx.records.get("permissions") or []
    ]


PERMISSIONS = EntityConfig(
    kind="permissions",
    sources=(RecordSource("permissions", queries.PERMISSIONS, param=None),),
    fields=(Derived("permissions", permission_list),),
    file_name="permissions.json",
    requires_site=False,
)
