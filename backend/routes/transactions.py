# backend/routes/transactions.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_db
from services.dashboard import DashboardService
from services.ledger import LedgerService
from utils.audit import write_log
from utils.dependencies import get_dashboard, get_ledger
from utils.errors import InsufficientStockError
import schemas.transaction as transaction_schemas

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.get("", response_model=List[transaction_schemas.TransactionWithProductOut])
def list_transactions(
    product_id: Optional[int] = Query(None, alias="productId"),
    dashboard: DashboardService = Depends(get_dashboard),
):
    return dashboard.transactions_with_product(product_id)


@router.post("", response_model=transaction_schemas.TransactionOut, status_code=status.HTTP_201_CREATED)
def create_transaction(
    payload: transaction_schemas.TransactionCreate,
    db: Session = Depends(get_db),
    ledger: LedgerService = Depends(get_ledger),
):
    try:
        transaction = ledger.record_transaction(
            payload.product_id, payload.type, payload.quantity, payload.notes
        )
    except InsufficientStockError as e:
        write_log(db, action="TRANSACTION_CREATE", resource="transactions", status="FAIL", meta=e.context)
        raise

    write_log(
        db, action="TRANSACTION_CREATE", resource="transactions",
        meta={"id": transaction.id, "product_id": transaction.product_id, "type": transaction.type, "quantity": transaction.quantity},
    )
    return transaction
