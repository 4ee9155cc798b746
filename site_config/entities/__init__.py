"""Registry of every generated config kind."""

from site_config.entities.content import CAROUSEL, NEWS, RULE, SERVICE, TOOL
from site_config.entities.permissions import PERMISSIONS
from site_config.entities.promotion import PROMOTION
from site_config.entities.site import FUNCTION, INFO, SITE
from site_config.entities.theme import THEME
from site_config.services.config_cache import EntityConfig

ENTITIES: dict[str, EntityConfig] = {
    entity.kind: entity
    for entity in (
        SITE, THEME, INFO, FUNCTION, RULE, CAROUSEL, NEWS, SERVICE, TOOL, PROMOTION, PERMISSIONS,
    )
}

SITE_KINDS = tuple(kind for kind, entity in ENTITIES.items() if entity.requires_site)


def get_entity(kind: str) -> EntityConfig:
    """Look up a config kind. Raises KeyError for unknown kinds."""
    return ENTITIES[kind]


__all__ = ["ENTITIES", "SITE_KINDS", "get_entity"]
