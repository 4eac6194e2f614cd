# backend/routes/dashboard.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import Field

from services.dashboard import DashboardService
from utils.dependencies import get_dashboard
from schemas.common import ApiModel
from schemas.product import ProductOut
from schemas.transaction import TransactionWithProductOut

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])

# === Response Schemas ===

class DashboardMetrics(ApiModel):
    total_products: int = Field(ge=0)
    stock_in_today: int = Field(ge=0)
    stock_out_today: int = Field(ge=0)
    low_stock_items: int = Field(ge=0)


# === Endpoint 1: Summary ===

@router.get("/metrics", response_model=DashboardMetrics)
def get_metrics(dashboard: DashboardService = Depends(get_dashboard)):
    return dashboard.dashboard_metrics()


# === Endpoint 2: Latest movements ===

@router.get("/recent-transactions", response_model=List[TransactionWithProductOut])
def get_recent_transactions(
    limit: Optional[int] = Query(None, ge=1, le=100),
    dashboard: DashboardService = Depends(get_dashboard),
):
    return dashboard.recent_transactions(limit)


# === Endpoint 3: Products running out ===

@router.get("/low-stock", response_model=List[ProductOut])
def get_low_stock(
    threshold: Optional[int] = Query(None, ge=0),
    dashboard: DashboardService = Depends(get_dashboard),
):
    return dashboard.low_stock_products(threshold)
