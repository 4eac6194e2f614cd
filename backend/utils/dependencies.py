# backend/utils/dependencies.py
from fastapi import Depends
from sqlalchemy.orm import Session

from database import get_db
from services.auth import Authenticator, PlaintextAuthenticator
from services.dashboard import DashboardService
from services.ledger import LedgerService
from services.store import EntityStore


def get_store(db: Session = Depends(get_db)) -> EntityStore:
    return EntityStore(db)


def get_ledger(store: EntityStore = Depends(get_store)) -> LedgerService:
    return LedgerService(store)


def get_dashboard(store: EntityStore = Depends(get_store)) -> DashboardService:
    return DashboardService(store)


# Override this dependency to plug in another authentication backend
def get_authenticator(store: EntityStore = Depends(get_store)) -> Authenticator:
    return PlaintextAuthenticator(store)
