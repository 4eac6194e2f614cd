# backend/routes/logs.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional, Any

from database import get_db, store_lock
from models.log import Log
from schemas.common import ApiModel, UtcDatetime

router = APIRouter(prefix="/logs", tags=["Logs"])

# --- SCHEMAS ---
class LogResponse(ApiModel):
    id: int
    user_id: Optional[int] = None
    action: str
    resource: str
    status: str
    ts: UtcDatetime
    meta: Optional[Any] = None

class LogPage(ApiModel):
    items: List[LogResponse]
    total: int
    page: int
    page_size: int

# --- ENDPOINT ---
@router.get("", response_model=LogPage)
def get_logs(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100, alias="pageSize"),
    action: Optional[str] = Query(None, description="Filter by action"),
    resource: Optional[str] = Query(None, description="Filter by resource"),
    status: Optional[str] = Query(None, description="Filter by status (SUCCESS/FAIL)"),
    db: Session = Depends(get_db),
):
    query = db.query(Log)

    if action:
        query = query.filter(Log.action.ilike(f"%{action}%"))
    if resource:
        query = query.filter(Log.resource.ilike(f"%{resource}%"))
    if status:
        query = query.filter(Log.status == status)

    # Newest first
    query = query.order_by(Log.ts.desc(), Log.id.desc())

    with store_lock:
        total = query.count()
        logs = query.offset((page - 1) * page_size).limit(page_size).all()

    return {
        "items": [LogResponse.model_validate(entry) for entry in logs],
        "total": total,
        "page": page,
        "page_size": page_size,
    }
