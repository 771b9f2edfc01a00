"""API routes for CoreTrack inventory data and cache administration."""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional
import logging

from config import DEFAULT_SALES_WINDOW_DAYS, MAX_SALES_WINDOW_DAYS
from models import (
    InventoryItem, SalesSummary, CacheStatsResponse,
    InvalidateRequest, InvalidateResponse, CleanupResponse
)
from api.dependencies import get_cache
from services.cache import TTLCache, build_cache_key, cache_key_pattern
from services.data_generator import generate_inventory, generate_sales_summary

logger = logging.getLogger(__name__)

# Create router
router = APIRouter()


def fetch_inventory(tenant_id: str, branch_id: str) -> List[InventoryItem]:
    """Load inventory for a branch from the data store."""
    return generate_inventory(tenant_id, branch_id)


def fetch_sales_summary(tenant_id: str, branch_id: str, days: int) -> SalesSummary:
    """Load a windowed sales summary for a branch from the data store."""
    return generate_sales_summary(tenant_id, branch_id, days)


def _key_or_400(*args) -> str:
    try:
        return build_cache_key(*args)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _pattern_or_400(*fields) -> str:
    try:
        return cache_key_pattern(*fields)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/tenants/{tenant_id}/branches/{branch_id}/inventory", response_model=List[InventoryItem])
async def get_inventory(
    tenant_id: str,
    branch_id: str,
    nocache: int = 0,
    cache: TTLCache = Depends(get_cache)
):
    """Get branch inventory, served from cache unless nocache=1."""
    cache_key = _key_or_400(tenant_id, branch_id, "inventory")

    if not nocache:
        cached = cache.get(cache_key)
        if cached is not None:
            return cached

    try:
        items = fetch_inventory(tenant_id, branch_id)
    except Exception as e:
        logger.error(f"Error fetching inventory for {tenant_id}/{branch_id}: {e}")
        raise HTTPException(status_code=503, detail="Inventory data unavailable")

    cache.set(cache_key, items)
    logger.info(f"Cached {len(items)} inventory items under {cache_key}")
    return items


@router.get("/tenants/{tenant_id}/branches/{branch_id}/sales", response_model=SalesSummary)
async def get_sales_summary(
    tenant_id: str,
    branch_id: str,
    days: int = Query(DEFAULT_SALES_WINDOW_DAYS, ge=1, le=MAX_SALES_WINDOW_DAYS),
    nocache: int = 0,
    cache: TTLCache = Depends(get_cache)
):
    """Get a sales summary for the last N days, cached per window size."""
    cache_key = _key_or_400(tenant_id, branch_id, "sales", days)

    if not nocache:
        cached = cache.get(cache_key)
        if cached is not None:
            return cached

    try:
        summary = fetch_sales_summary(tenant_id, branch_id, days)
    except Exception as e:
        logger.error(f"Error fetching sales for {tenant_id}/{branch_id}: {e}")
        raise HTTPException(status_code=503, detail="Sales data unavailable")

    cache.set(cache_key, summary)
    return summary


@router.get("/cache/stats", response_model=CacheStatsResponse)
async def get_cache_stats(cache: TTLCache = Depends(get_cache)):
    """Report physical cache size and hit/miss counters."""
    stats = cache.stats()
    return CacheStatsResponse(size=stats.size, hits=stats.hits, misses=stats.misses)


@router.post("/cache/invalidate", response_model=InvalidateResponse)
async def invalidate_cache(
    request: Optional[InvalidateRequest] = None,
    cache: TTLCache = Depends(get_cache)
):
    """Drop every entry whose key contains the pattern, or everything if none is given."""
    pattern = request.pattern if request else None
    removed = cache.invalidate(pattern)
    return InvalidateResponse(pattern=pattern, removed=removed)


@router.delete("/tenants/{tenant_id}/cache", response_model=InvalidateResponse)
async def invalidate_tenant_cache(tenant_id: str, cache: TTLCache = Depends(get_cache)):
    """Drop all cached data for one tenant."""
    pattern = _pattern_or_400(tenant_id)
    return InvalidateResponse(pattern=pattern, removed=cache.invalidate(pattern))


@router.delete("/tenants/{tenant_id}/branches/{branch_id}/cache", response_model=InvalidateResponse)
async def invalidate_branch_cache(
    tenant_id: str,
    branch_id: str,
    cache: TTLCache = Depends(get_cache)
):
    """Drop all cached data for one branch."""
    pattern = _pattern_or_400(tenant_id, branch_id)
    return InvalidateResponse(pattern=pattern, removed=cache.invalidate(pattern))


@router.post("/cache/cleanup", response_model=CleanupResponse)
async def cleanup_cache(cache: TTLCache = Depends(get_cache)):
    """Run a sweep pass immediately."""
    removed = cache.cleanup()
    return CleanupResponse(removed=removed, size=cache.size())
