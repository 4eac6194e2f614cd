"""
Tests — Ledger
=================
"""

import pytest

from models.transaction import Transaction
from services.ledger import LedgerService
from utils.errors import InsufficientStockError, NotFoundError, ValidationError


def _setup(store, stock=10):
    product = store.create_product(
        {"name": "Widget", "sku": "W-1", "category": "office", "current_stock": stock}
    )
    return LedgerService(store), product


class TestRecordTransaction:
    def test_in_increases_stock_by_quantity(self, store):
        ledger, product = _setup(store)
        t = ledger.record_transaction(product.id, "IN", 7, "delivery")
        assert t.type == "IN"
        assert t.quantity == 7
        assert t.notes == "delivery"
        assert store.get_product(product.id).current_stock == 17

    def test_out_decreases_stock_by_quantity(self, store):
        ledger, product = _setup(store)
        ledger.record_transaction(product.id, "OUT", 3)
        assert store.get_product(product.id).current_stock == 7

    def test_out_of_entire_stock_reaches_zero(self, store):
        ledger, product = _setup(store)
        ledger.record_transaction(product.id, "OUT", 10)
        assert store.get_product(product.id).current_stock == 0

    def test_insufficient_stock_persists_nothing(self, store, db):
        ledger, product = _setup(store)
        ledger.record_transaction(product.id, "OUT", 3)

        with pytest.raises(InsufficientStockError) as exc:
            ledger.record_transaction(product.id, "OUT", 100)

        assert exc.value.context == {"product_id": product.id, "available": 7, "requested": 100}
        assert store.get_product(product.id).current_stock == 7
        assert db.query(Transaction).count() == 1

    def test_unknown_product(self, store, db):
        ledger, _ = _setup(store)
        with pytest.raises(NotFoundError):
            ledger.record_transaction(999, "IN", 1)
        assert db.query(Transaction).count() == 0

    @pytest.mark.parametrize("type_, quantity", [("MOVE", 1), ("IN", 0), ("OUT", -2)])
    def test_invalid_input(self, store, type_, quantity):
        ledger, product = _setup(store)
        with pytest.raises(ValidationError):
            ledger.record_transaction(product.id, type_, quantity)
        assert store.get_product(product.id).current_stock == 10

    def test_stock_never_negative_over_a_sequence(self, store):
        ledger, product = _setup(store, stock=2)
        moves = [("OUT", 1), ("IN", 4), ("OUT", 5), ("OUT", 1), ("IN", 2), ("OUT", 2)]
        for type_, qty in moves:
            try:
                ledger.record_transaction(product.id, type_, qty)
            except InsufficientStockError:
                pass
            assert store.get_product(product.id).current_stock >= 0
        assert store.get_product(product.id).current_stock == 0


class TestConcurrentWriters:
    def test_parallel_stock_outs_never_oversell(self, store):
        from concurrent.futures import ThreadPoolExecutor

        from database import SessionLocal, store_lock
        from services.store import EntityStore

        _, product = _setup(store, stock=10)

        def take_one(_):
            session = SessionLocal()
            try:
                LedgerService(EntityStore(session)).record_transaction(product.id, "OUT", 1)
                return True
            except InsufficientStockError:
                return False
            finally:
                with store_lock:
                    session.close()

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(take_one, range(30)))

        store.db.expire_all()
        outs = store.list_transactions_by_product(product.id)
        assert results.count(True) == 10
        assert len(outs) == 10
        assert store.get_product(product.id).current_stock == 10 - sum(t.quantity for t in outs) == 0

    def test_readers_never_see_half_applied_movements(self, store):
        from concurrent.futures import ThreadPoolExecutor

        from database import SessionLocal, store_lock
        from services.store import EntityStore

        _, product = _setup(store, stock=10)

        def write(_):
            session = SessionLocal()
            try:
                LedgerService(EntityStore(session)).record_transaction(product.id, "IN", 2)
            finally:
                with store_lock:
                    session.close()

        def read(_):
            session = SessionLocal()
            try:
                reader = EntityStore(session)
                with reader.lock:
                    stock = reader.get_product(product.id).current_stock
                    history = reader.list_transactions_by_product(product.id)
                return stock == 10 + sum(t.quantity for t in history)
            finally:
                with store_lock:
                    session.close()

        with ThreadPoolExecutor(max_workers=8) as pool:
            writes = [pool.submit(write, i) for i in range(20)]
            reads = [pool.submit(read, i) for i in range(40)]
            for f in writes:
                f.result()
            consistent = [f.result() for f in reads]

        store.db.expire_all()
        assert all(consistent)
        assert store.get_product(product.id).current_stock == 50
