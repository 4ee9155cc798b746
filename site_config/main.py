"""Site config service — FastAPI application entry point.

Regenerates, reads and indexes the per-site config documents.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from site_config.config import settings
from site_config.database import check_db, close_db, get_db
from site_config.entities import ENTITIES, get_entity
from site_config.errors import InvalidArgumentError, StoreError
from site_config.mapping.currency import round_up_amount
from site_config.schemas import (
    CnameList,
    CnameRequest,
    ConfigWriteResult,
    LookupResult,
    RoundedAmount,
)
from site_config.services.config_cache import ConfigCache
from site_config.services.config_store import ConfigFileHandler
from site_config.services.row_fetcher import RowFetcher
from site_config.services.site_cname import SiteCname
from site_config.services.site_lookup import SiteLookup

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger("site_config")


# ═══════════════ LIFESPAN ═══════════════

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Site config service starting | config_path=%s", settings.config_path)
    db_ok = check_db()
    logger.info("Database: %s", "connected" if db_ok else "unavailable")

    yield

    close_db()
    logger.info("Site config service shutting down")


# ═══════════════ APP ═══════════════

app = FastAPI(
    title="Site Config API",
    description="Generates and serves per-site configuration documents",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error("Store error | path=%s | %s", request.url.path, str(exc)[:300])
    return JSONResponse(status_code=503, content={"error": "Store unavailable."})


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


# ═══════════════ DEPENDENCIES ═══════════════

def get_handler() -> ConfigFileHandler:
    return ConfigFileHandler(settings.config_path)


def get_config_cache(
    db: Session = Depends(get_db),
    handler: ConfigFileHandler = Depends(get_handler),
) -> ConfigCache:
    return ConfigCache(RowFetcher(db), handler)


def get_site_lookup(
    db: Session = Depends(get_db),
    handler: ConfigFileHandler = Depends(get_handler),
) -> SiteLookup:
    return SiteLookup(RowFetcher(db), handler)


def get_site_cname(db: Session = Depends(get_db)) -> SiteCname:
    return SiteCname(RowFetcher(db))


def _entity_or_404(kind: str, site_scoped: bool = True):
    entity = ENTITIES.get(kind)
    if entity is None or entity.requires_site != site_scoped:
        raise HTTPException(status_code=404, detail=f"Unknown config kind: {kind}")
    return entity


# ═══════════════ ENDPOINTS ═══════════════

@app.get("/health")
def health():
    return {"status": "ok", "database": check_db(), "kinds": sorted(ENTITIES)}


@app.post("/api/configs/permissions", response_model=ConfigWriteResult)
def write_permissions(cache: ConfigCache = Depends(get_config_cache)):
    written = cache.write(get_entity("permissions"))
    if not written:
        raise HTTPException(status_code=500, detail="Config could not be written")
    return ConfigWriteResult(kind="permissions", written=True)


@app.get("/api/configs/permissions")
def read_permissions(cache: ConfigCache = Depends(get_config_cache)):
    entity = get_entity("permissions")
    if not cache.exists(entity):
        raise HTTPException(status_code=404, detail="Config not generated")
    return cache.read(entity)


@app.post("/api/configs/{kind}/sites/{site_id}", response_model=ConfigWriteResult)
def write_config(
    kind: str,
    site_id: int,
    topic_id: int | None = None,
    is_public: int = 1,
    cache: ConfigCache = Depends(get_config_cache),
):
    """Regenerate one config document for a site."""
    entity = _entity_or_404(kind)
    if entity.needs_topic and topic_id is None:
        raise HTTPException(status_code=400, detail="topic_id is required")
    if cache.get_site(site_id, is_public) is None:
        raise HTTPException(status_code=404, detail="Site not found")

    written = cache.write(entity, site_id=site_id, topic_id=topic_id, is_public=is_public)
    if not written:
        raise HTTPException(status_code=500, detail="Config could not be written")
    return ConfigWriteResult(kind=kind, site_id=site_id, written=True)


@app.get("/api/configs/{kind}/{site_code}")
def read_config(kind: str, site_code: str, cache: ConfigCache = Depends(get_config_cache)):
    entity = _entity_or_404(kind)
    if not cache.exists(entity, site_code):
        raise HTTPException(status_code=404, detail="Config not generated")
    return cache.read(entity, site_code)


@app.get("/api/lookups/{index}")
def read_lookup(index: str, lookup: SiteLookup = Depends(get_site_lookup)):
    return lookup.index(index).load()


@app.post("/api/lookups/{index}/bootstrap", response_model=LookupResult)
def bootstrap_lookup(index: str, lookup: SiteLookup = Depends(get_site_lookup)):
    changed = lookup.bootstrap(index)
    return LookupResult(index=index, changed=changed, entries=len(lookup.index(index).load()))


@app.put("/api/lookups/{index}/sites/{site_id}", response_model=LookupResult)
def set_lookup_site(
    index: str,
    site_id: int,
    is_public: int = 1,
    lookup: SiteLookup = Depends(get_site_lookup),
):
    if not lookup.set_site(site_id, is_public, index):
        raise HTTPException(status_code=404, detail="Site not found or not indexable")
    return LookupResult(index=index, changed=True, entries=len(lookup.index(index).load()))


@app.delete("/api/lookups/{index}/sites/{site_id}", response_model=LookupResult)
def remove_lookup_site(index: str, site_id: int, lookup: SiteLookup = Depends(get_site_lookup)):
    if not lookup.remove_site(site_id, index):
        raise HTTPException(status_code=404, detail="Site not in lookup")
    return LookupResult(index=index, changed=True, entries=len(lookup.index(index).load()))


@app.get("/api/currency/round", response_model=RoundedAmount)
def round_currency(amount: str, currency: str):
    rounded = round_up_amount(amount, currency, settings.currency_config_path)
    return RoundedAmount(amount=amount, currency=currency, rounded=str(rounded))


@app.get("/api/sites/{site_id}/cnames", response_model=CnameList)
def list_cnames(site_id: int, repo: SiteCname = Depends(get_site_cname)):
    return CnameList(site_id=site_id, cnames=repo.read(site_id))


@app.post("/api/sites/{site_id}/cnames", status_code=201, response_model=CnameList)
def add_cname(site_id: int, body: CnameRequest, repo: SiteCname = Depends(get_site_cname)):
    if repo.check_cname(body.cname):
        raise HTTPException(status_code=409, detail="CNAME already in use")
    repo.create(site_id, body.cname, body.cvalue)
    return CnameList(site_id=site_id, cnames=repo.read(site_id))


@app.delete("/api/sites/{site_id}/cnames/{cname}", status_code=204)
def delete_cname(site_id: int, cname: str, repo: SiteCname = Depends(get_site_cname)):
    if not repo.delete(site_id, cname):
        raise HTTPException(status_code=404, detail="CNAME not found")


def serve() -> None:
    """Run the API server on the configured host and port."""
    logger.info("Starting site config API on %s:%d", settings.host, settings.port)
    uvicorn.run(
        "site_config.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    serve()
