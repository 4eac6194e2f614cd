# backend/routes/products.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from database import get_db
from services.store import EntityStore
from utils.audit import write_log
from utils.dependencies import get_store
from utils.errors import ConflictError, NotFoundError
import schemas.product as product_schemas

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=List[product_schemas.ProductOut])
def list_products(store: EntityStore = Depends(get_store)):
    return store.list_products()


@router.get("/{product_id}", response_model=product_schemas.ProductOut)
def get_product(product_id: int, store: EntityStore = Depends(get_store)):
    product = store.get_product(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


@router.post("", response_model=product_schemas.ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: product_schemas.ProductCreate,
    db: Session = Depends(get_db),
    store: EntityStore = Depends(get_store),
):
    try:
        product = store.create_product(payload.model_dump())
    except ConflictError:
        write_log(db, action="PRODUCT_CREATE", resource="products", status="FAIL", meta={"sku": payload.sku})
        raise
    write_log(db, action="PRODUCT_CREATE", resource="products", meta={"id": product.id, "sku": product.sku})
    return product


@router.put("/{product_id}", response_model=product_schemas.ProductOut)
def update_product(
    product_id: int,
    payload: product_schemas.ProductUpdate,
    db: Session = Depends(get_db),
    store: EntityStore = Depends(get_store),
):
    changes = payload.model_dump(exclude_unset=True)
    try:
        product = store.update_product(product_id, changes)
    except ConflictError:
        write_log(db, action="PRODUCT_UPDATE", resource="products", status="FAIL", meta={"id": product_id, "sku": changes.get("sku")})
        raise
    write_log(db, action="PRODUCT_UPDATE", resource="products", meta={"id": product.id, "fields": sorted(changes)})
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
    store: EntityStore = Depends(get_store),
):
    # Historical transactions are kept; they will report an unknown product
    if not store.delete_product(product_id):
        raise NotFoundError("Product not found")
    write_log(db, action="PRODUCT_DELETE", resource="products", meta={"id": product_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
