"""
Product API routes — list, get, add, update, delete.

Route prefix: /user/products.  Every route requires a Bearer token.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel, ConfigDict
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user_id
from database import helpers
from database.models import Product
from utils.errors import NotFoundError
from utils.validators import validate_product

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user/products", tags=["products"])


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    price: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


async def _load(session: AsyncSession, product_id: int) -> Product:
    product = await helpers.get_product(session, product_id)
    if product is None:
        raise NotFoundError("Product Not Found")
    return product


@router.get("", response_model=List[ProductOut])
async def get_product_list(
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> List[ProductOut]:
    products = await helpers.list_products(session)
    return [ProductOut.model_validate(p) for p in products]


@router.get("/{product_id}", response_model=ProductOut)
async def get_product_by_id(
    product_id: int,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> ProductOut:
    return ProductOut.model_validate(await _load(session, product_id))


@router.post("", response_model=ProductOut)
async def add_product(
    user_id: int = Depends(get_current_user_id),
    payload: Dict[str, Any] = Body(...),
    session: AsyncSession = Depends(db_session),
) -> ProductOut:
    """Create a product; price, description and name are all required."""
    fields = validate_product(payload)
    product = await helpers.create_product(session, **fields)
    return ProductOut.model_validate(product)


@router.put("/{product_id}", response_model=ProductOut)
async def update_product(
    product_id: int,
    user_id: int = Depends(get_current_user_id),
    payload: Dict[str, Any] = Body(...),
    session: AsyncSession = Depends(db_session),
) -> ProductOut:
    """
    Partially update a product.

    Only the fields present in the body are validated and written; the
    product must already exist.
    """
    product = await _load(session, product_id)
    fields = validate_product(payload, partial=True)
    product = await helpers.update_product(session, product, fields)
    return ProductOut.model_validate(product)


@router.delete("/{product_id}")
async def delete_product_by_id(
    product_id: int,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, str]:
    product = await _load(session, product_id)
    await helpers.delete_product(session, product)
    return {"message": "Product deleted"}
