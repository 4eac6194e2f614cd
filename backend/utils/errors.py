# backend/utils/errors.py
from typing import Any, Dict, List, Optional


class InventoryError(Exception):
    """
    Base class for domain errors raised by the store and services.

    Each subclass carries the HTTP status the API answers with, so the
    exception handlers in main.py stay a single mapping.
    """

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.context = context or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationError(InventoryError):
    """Malformed or missing input, with per-field issues."""

    status_code = 400
    default_message = "Invalid input"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "errors": self.errors}


class InvalidCredentialsError(InventoryError):
    status_code = 401
    default_message = "Invalid credentials"


class NotFoundError(InventoryError):
    status_code = 404
    default_message = "Not found"


class ConflictError(InventoryError):
    # Duplicate SKU; the public API reports it as a bad request
    status_code = 400
    default_message = "SKU already exists"


class InsufficientStockError(InventoryError):
    status_code = 400
    default_message = "Insufficient stock"


class InternalError(InventoryError):
    pass
