# backend/services/dashboard.py
from typing import Dict, List, Optional

from config import settings
from models.product import Product
from services.store import EntityStore
from utils.time_utils import resolve_timezone, start_of_day

UNKNOWN_PRODUCT_NAME = "Unknown Product"
UNKNOWN_PRODUCT_SKU = "Unknown SKU"


class DashboardService:
    """Read-only projections over the store: metrics and joined views."""

    def __init__(
        self,
        store: EntityStore,
        low_stock_threshold: Optional[int] = None,
        recent_limit: Optional[int] = None,
        timezone_name: Optional[str] = None,
    ):
        # Unset arguments fall back to the configured dashboard policy
        self.store = store
        self.low_stock_threshold = settings.LOW_STOCK_THRESHOLD if low_stock_threshold is None else low_stock_threshold
        self.recent_limit = recent_limit or settings.RECENT_TRANSACTIONS_LIMIT
        self.tz = resolve_timezone(timezone_name or settings.DASHBOARD_TIMEZONE)

    def _with_product(self, transactions) -> List[Dict]:
        # Products are looked up at read time; deleted ones fall back to sentinels
        cache: Dict[int, Optional[Product]] = {}
        rows = []
        for t in transactions:
            if t.product_id not in cache:
                cache[t.product_id] = self.store.get_product(t.product_id)
            product = cache[t.product_id]
            rows.append({
                "id": t.id,
                "product_id": t.product_id,
                "type": t.type,
                "quantity": t.quantity,
                "notes": t.notes,
                "timestamp": t.timestamp,
                "product_name": product.name if product else UNKNOWN_PRODUCT_NAME,
                "product_sku": product.sku if product else UNKNOWN_PRODUCT_SKU,
            })
        return rows

    def transactions_with_product(self, product_id: Optional[int] = None) -> List[Dict]:
        if product_id is not None:
            transactions = self.store.list_transactions_by_product(product_id)
        else:
            transactions = self.store.list_transactions()
        return self._with_product(transactions)

    def dashboard_metrics(self) -> Dict[str, int]:
        now = self.store.clock()
        today = self.store.list_transactions_between(start_of_day(now, self.tz), now)

        return {
            "total_products": self.store.count_products(),
            "stock_in_today": sum(t.quantity for t in today if t.type == "IN"),
            "stock_out_today": sum(t.quantity for t in today if t.type == "OUT"),
            "low_stock_items": len(self.store.list_products_at_or_below(self.low_stock_threshold)),
        }

    def recent_transactions(self, limit: Optional[int] = None) -> List[Dict]:
        if limit is None:
            limit = self.recent_limit
        return self._with_product(self.store.list_transactions(limit=limit))

    def low_stock_products(self, threshold: Optional[int] = None) -> List[Product]:
        if threshold is None:
            threshold = self.low_stock_threshold
        return self.store.list_products_at_or_below(threshold)
