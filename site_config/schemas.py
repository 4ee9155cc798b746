"""Pydantic models shared by the builders and the HTTP layer."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ═══════════════ RECORDS ═══════════════

class LookupEntry(BaseModel):
    """Summary record stored in the site / domain lookup indexes."""
    site_id: int
    site_code: str = ""
    domain: str = ""
    file_path: str = ""

    @classmethod
    def from_site(cls, site: dict) -> "LookupEntry":
        return cls(
            site_id=site.get("site_id", site.get("id")),
            site_code=site.get("site_code") or "",
            domain=site.get("domain") or "",
            file_path=site.get("file_path") or "",
        )


class PageSetting(BaseModel):
    """One page row for menu / block assembly (site_page_setting joined with topic_page).

    Row values may be text, numbers or NULL: a NULL or unparsable sort/status
    becomes None, and numeric names or paths are kept as text.
    """
    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    page_id: int | None = None
    sort: int | None = None
    status: int | None = None
    custom_name: str | None = None
    custom_path: str | None = None
    base_name: str | None = ""
    base_path: str | None = ""

    @field_validator("sort", "status", mode="before")
    @classmethod
    def _lenient_int(cls, value):
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError):
            return None

    @field_validator("custom_name", "custom_path", "base_name", "base_path", mode="before")
    @classmethod
    def _number_as_text(cls, value):
        if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            return str(value)
        return value


class MenuItem(BaseModel):
    name: str = ""
    path: str = ""


class FeatureSelection(BaseModel):
    """Product filter attached to feature_product blocks."""
    model_config = ConfigDict(extra="ignore")

    type: str = "latest"
    main_class: int = 0
    sub_class: int = 0


# ═══════════════ API ═══════════════

class ConfigWriteResult(BaseModel):
    kind: str
    site_id: int | None = None
    written: bool = False


class LookupResult(BaseModel):
    index: str
    changed: bool = False
    entries: int = 0


class RoundedAmount(BaseModel):
    amount: str
    currency: str
    rounded: str


class CnameRequest(BaseModel):
    cname: str = Field(min_length=1)
    cvalue: str = ""


class CnameList(BaseModel):
    site_id: int
    cnames: list[dict[str, Any]] = Field(default_factory=list)
