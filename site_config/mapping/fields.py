"""Field mapper — declarative field definitions that turn fetched records into one flat mapping.

Each field resolves a single output key and declares its own fallback, so every
declared key is present in the output whether or not the source row exists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from site_config.services.row_fetcher import RowFetcher


@dataclass
class BuildContext:
    """Everything a field may read while one config is being built."""
    fetcher: RowFetcher
    site_id: int | None = None
    topic_id: int | None = None
    is_public: int = 1
    site: dict = field(default_factory=dict)
    records: dict[str, Any] = field(default_factory=dict)
    image_base_url: str = ""


def field_with_default(record: dict | None, column: str, default: Any = "") -> Any:
    """record[column], or `default` when the record, the column or its value is missing."""
    if not record:
        return default
    value = record.get(column)
    return default if value is None else value


def build_asset_url(base_url: str, prefix: str, site_name: str, filename: Any) -> str:
    """Public URL of a stored asset, or "" when there is no filename."""
    if filename is None or filename == "":
        return ""
    return f"{base_url}{prefix}{site_name}/{filename}"


@dataclass(frozen=True)
class Column:
    """Scalar pulled from a single-record source."""
    dest: str
    source: str
    column: str | None = None
    default: Any = ""

    def resolve(self, ctx: BuildContext) -> Any:
        return field_with_default(ctx.records.get(self.source), self.column or self.dest, self.default)


@dataclass(frozen=True)
class AssetUrl:
    """Image URL built from the site name and a stored filename."""
    dest: str
    source: str
    column: str | None = None
    prefix: str = ""

    def resolve(self, ctx: BuildContext) -> str:
        filename = field_with_default(ctx.records.get(self.source), self.column or self.dest, None)
        return build_asset_url(ctx.image_base_url, self.prefix, ctx.site.get("name") or "", filename)


@dataclass(frozen=True)
class Rows:
    """Multi-record source passed through as a list."""
    dest: str
    source: str

    def resolve(self, ctx: BuildContext) -> list:
        return ctx.records.get(self.source) or []


@dataclass(frozen=True)
class Record:
    """Whole single-record source, {} when missing."""
    dest: str
    source: str

    def resolve(self, ctx: BuildContext) -> dict:
        return ctx.records.get(self.source) or {}


@dataclass(frozen=True)
class Derived:
    """Value computed from the whole context."""
    dest: str
    func: Callable[[BuildContext], Any]

    def resolve(self, ctx: BuildContext) -> Any:
        return self.func(ctx)


def map_fields(fields, ctx: BuildContext) -> dict:
    """Resolve every field in order. A later field with the same dest replaces an earlier one."""
    return {spec.dest: spec.resolve(ctx) for spec in fields}
