"""Mock data generator standing in for the CoreTrack document store.

Data is seeded from the tenant and branch ids so repeated calls for the same
branch return the same items.
"""

import random
from datetime import datetime, timedelta
from typing import List

from models import InventoryItem, DailySales, SalesSummary, StockStatus

CATALOG = [
    ("Coffee Beans", "Beverages", "kg"),
    ("Whole Milk", "Dairy", "L"),
    ("Sugar", "Dry Goods", "kg"),
    ("Paper Cups", "Packaging", "pcs"),
    ("Chocolate Syrup", "Beverages", "L"),
    ("Croissant Dough", "Bakery", "pcs"),
    ("Burger Patty", "Meat", "pcs"),
    ("Lettuce", "Produce", "kg"),
]


def _rng(*parts: str) -> random.Random:
    return random.Random("|".join(parts))


def _stock_status(current: float, minimum: float) -> StockStatus:
    if current <= 0:
        return StockStatus.OUT_OF_STOCK
    if current <= minimum:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def generate_inventory(tenant_id: str, branch_id: str) -> List[InventoryItem]:
    """Generate the inventory list for one branch."""
    rng = _rng(tenant_id, branch_id, "inventory")
    items = []

    for i, (name, category, unit) in enumerate(CATALOG):
        min_stock = round(rng.uniform(5, 20), 1)
        # Roughly one item in eight is out of stock
        current_stock = 0.0 if rng.random() < 0.125 else round(rng.uniform(0, 100), 1)

        items.append(InventoryItem(
            id=f"{branch_id}_item_{i+1}",
            name=name,
            category=category,
            unit=unit,
            currentStock=current_stock,
            minStock=min_stock,
            costPerUnit=round(rng.uniform(0.05, 25), 2),
            status=_stock_status(current_stock, min_stock)
        ))

    return items


def generate_sales_summary(tenant_id: str, branch_id: str, days: int) -> SalesSummary:
    """Generate a daily sales breakdown for the last ``days`` days."""
    rng = _rng(tenant_id, branch_id, "sales")
    today = datetime.now().date()
    daily = []

    for offset in range(days - 1, -1, -1):
        orders = rng.randint(20, 200)
        daily.append(DailySales(
            date=(today - timedelta(days=offset)).strftime("%Y-%m-%d"),
            orders=orders,
            revenue=round(orders * rng.uniform(4, 12), 2)
        ))

    total_orders = sum(d.orders for d in daily)
    total_revenue = round(sum(d.revenue for d in daily), 2)

    return SalesSummary(
        tenantId=tenant_id,
        branchId=branch_id,
        days=days,
        totalOrders=total_orders,
        totalRevenue=total_revenue,
        averageOrderValue=round(total_revenue / total_orders, 2) if total_orders else 0.0,
        daily=daily
    )
