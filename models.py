"""Data models for the CoreTrack inventory and cache API."""

from pydantic import BaseModel
from typing import List, Optional
from enum import Enum


class StockStatus(str, Enum):
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"


class InventoryItem(BaseModel):
    id: str
    name: str
    category: str
    unit: str
    currentStock: float
    minStock: float
    costPerUnit: float
    status: StockStatus


class DailySales(BaseModel):
    date: str
    orders: int
    revenue: float


class SalesSummary(BaseModel):
    tenantId: str
    branchId: str
    days: int
    totalOrders: int
    totalRevenue: float
    averageOrderValue: float
    daily: List[DailySales]


class CacheStatsResponse(BaseModel):
    size: int
    hits: int
    misses: int


class InvalidateRequest(BaseModel):
    pattern: Optional[str] = None


class InvalidateResponse(BaseModel):
    pattern: Optional[str] = None
    removed: int


class CleanupResponse(BaseModel):
    removed: int
    size: int
