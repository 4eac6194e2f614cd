# backend/services/store.py
"""
Entity store for users, products and transactions.

Identity is assigned by the database (autoincrement primary keys). Every
operation runs under the process-wide ``store_lock``; writes are grouped with
``atomic()`` so a group of changes commits once, at the outermost scope, and
rolls back entirely on any exception.

Invariants kept here rather than by callers:
- product SKUs are unique across live products,
- a product's current_stock never drops below zero.
"""
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from database import store_lock
from models.product import Product
from models.transaction import Transaction
from models.users import User
from utils.errors import ConflictError, NotFoundError, ValidationError
from utils.time_utils import utcnow

PRODUCT_FIELDS = ("name", "sku", "category", "current_stock")


class EntityStore:
    def __init__(self, db: Session, lock=None, clock=utcnow):
        self.db = db
        self.lock = lock or store_lock
        self.clock = clock
        self._depth = 0

    @contextmanager
    def atomic(self):
        """Serialize a group of writes and commit them as one unit."""
        with self.lock:
            self._depth += 1
            try:
                yield self
                if self._depth == 1:
                    self.db.commit()
            except Exception:
                if self._depth == 1:
                    self.db.rollback()
                raise
            finally:
                self._depth -= 1

    # ---- USERS ----
    def create_user(self, data: Dict[str, Any]) -> User:
        with self.atomic():
            user = User(username=data["username"], password=data["password"])
            self.db.add(user)
            self.db.flush()
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        with self.lock:
            return self.db.get(User, user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self.lock:
            return self.db.query(User).filter(User.username == username).first()

    # ---- PRODUCTS ----
    def get_product(self, product_id: int) -> Optional[Product]:
        with self.lock:
            return self.db.get(Product, product_id)

    def get_product_by_sku(self, sku: str) -> Optional[Product]:
        with self.lock:
            return self.db.query(Product).filter(Product.sku == sku).first()

    def _ensure_sku_free(self, sku: str, product_id: Optional[int] = None) -> None:
        holder = self.get_product_by_sku(sku)
        if holder is not None and holder.id != product_id:
            raise ConflictError("SKU already exists", context={"sku": sku})

    @staticmethod
    def _check_stock(value) -> None:
        if value is not None and value < 0:
            raise ValidationError(errors=[{"field": "currentStock", "message": "Stock cannot be negative"}])

    def create_product(self, data: Dict[str, Any]) -> Product:
        self._check_stock(data.get("current_stock"))
        with self.atomic():
            self._ensure_sku_free(data["sku"])
            product = Product(
                name=data["name"],
                sku=data["sku"],
                category=data["category"],
                current_stock=data.get("current_stock", 0),
                created_at=self.clock(),
            )
            self.db.add(product)
            self.db.flush()
        return product

    def update_product(self, product_id: int, data: Dict[str, Any]) -> Product:
        self._check_stock(data.get("current_stock"))
        with self.atomic():
            product = self.get_product(product_id)
            if product is None:
                raise NotFoundError("Product not found")
            if data.get("sku") is not None:
                self._ensure_sku_free(data["sku"], product_id)
            for field in PRODUCT_FIELDS:
                if data.get(field) is not None:
                    setattr(product, field, data[field])
            self.db.flush()
        return product

    def set_stock(self, product: Product, quantity: int) -> Product:
        with self.atomic():
            product.current_stock = max(0, quantity)
            self.db.flush()
        return product

    def delete_product(self, product_id: int) -> bool:
        with self.atomic():
            product = self.get_product(product_id)
            if product is None:
                return False
            self.db.delete(product)
        return True

    def list_products(self) -> List[Product]:
        with self.lock:
            # Case-insensitive first, like a locale compare; exact name and id settle ties
            return (
                self.db.query(Product)
                .order_by(func.lower(Product.name).asc(), Product.name.asc(), Product.id.asc())
                .all()
            )

    def count_products(self) -> int:
        with self.lock:
            return self.db.query(Product).count()

    def list_products_at_or_below(self, threshold: int) -> List[Product]:
        with self.lock:
            return (
                self.db.query(Product)
                .filter(Product.current_stock <= threshold)
                .order_by(Product.current_stock.asc(), Product.id.asc())
                .all()
            )

    # ---- TRANSACTIONS ----
    def _transactions_query(self):
        # Newest first; id breaks ties between equal timestamps
        return self.db.query(Transaction).order_by(Transaction.timestamp.desc(), Transaction.id.desc())

    def list_transactions(self, limit: Optional[int] = None) -> List[Transaction]:
        with self.lock:
            query = self._transactions_query()
            if limit is not None:
                query = query.limit(limit)
            return query.all()

    def list_transactions_by_product(self, product_id: int) -> List[Transaction]:
        with self.lock:
            return self._transactions_query().filter(Transaction.product_id == product_id).all()

    def list_transactions_between(self, start, end) -> List[Transaction]:
        with self.lock:
            return (
                self.db.query(Transaction)
                .filter(Transaction.timestamp >= start, Transaction.timestamp <= end)
                .all()
            )

    def create_transaction(self, data: Dict[str, Any]) -> Transaction:
        with self.atomic():
            transaction = Transaction(
                product_id=data["product_id"],
                type=data["type"],
                quantity=data["quantity"],
                notes=data.get("notes"),
                timestamp=self.clock(),
            )
            self.db.add(transaction)
            self.db.flush()
        return transaction
