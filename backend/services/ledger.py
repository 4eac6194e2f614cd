# backend/services/ledger.py
import logging
from typing import Optional

from models.transaction import Transaction
from services.store import EntityStore
from utils.errors import InsufficientStockError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

TRANSACTION_TYPES = ("IN", "OUT")


class LedgerService:
    """Applies stock movements to products together with their transaction record."""

    def __init__(self, store: EntityStore):
        self.store = store

    def record_transaction(
        self,
        product_id: int,
        type: str,
        quantity: int,
        notes: Optional[str] = None,
    ) -> Transaction:
        """
        Append a transaction and apply its effect on the product's stock.

        Lookup, stock check, insert and stock update share one atomic scope:
        either both the record and the new stock are committed, or neither.
        Raises NotFoundError for an unknown product and InsufficientStockError
        when an OUT exceeds the stock on hand.
        """
        errors = []
        if type not in TRANSACTION_TYPES:
            errors.append({"field": "type", "message": "Type must be IN or OUT"})
        if not isinstance(quantity, int) or quantity <= 0:
            errors.append({"field": "quantity", "message": "Quantity must be a positive integer"})
        if errors:
            raise ValidationError(errors=errors)

        with self.store.atomic():
            product = self.store.get_product(product_id)
            if product is None:
                raise NotFoundError("Product not found", context={"product_id": product_id})

            if type == "OUT" and product.current_stock < quantity:
                logger.warning(
                    "Rejected OUT of %s for product %s (stock %s)",
                    quantity, product.id, product.current_stock,
                )
                raise InsufficientStockError(
                    context={"product_id": product.id, "available": product.current_stock, "requested": quantity}
                )

            transaction = self.store.create_transaction(
                {"product_id": product.id, "type": type, "quantity": quantity, "notes": notes}
            )

            delta = quantity if type == "IN" else -quantity
            self.store.set_stock(product, product.current_stock + delta)

        logger.info(
            "Recorded %s of %s for product %s, stock now %s",
            type, quantity, product.id, product.current_stock,
        )
        return transaction
