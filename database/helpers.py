"""
Database helper functions — row-level CRUD for users and products.

Every write commits immediately; any SQLAlchemy failure is rolled back,
logged and re-raised as ``PersistenceError`` carrying the client message.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Product, User
from utils.errors import PersistenceError

logger = logging.getLogger(__name__)

INSERT_FAILED = "failed to insert record into the database"
UPDATE_FAILED = "failed to update record into the database"
DELETE_FAILED = "failed to delete record from the database"
READ_FAILED = "failed to read from the database"


async def _commit(session: AsyncSession, message: str) -> None:
    try:
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("Commit failed: %s", message)
        raise PersistenceError(message) from exc


async def _scalar(session: AsyncSession, stmt) -> Any:
    try:
        result = await session.execute(stmt)
    except SQLAlchemyError as exc:
        logger.exception("Query failed")
        raise PersistenceError(READ_FAILED) from exc
    return result.scalar_one_or_none()


# ── Users ───────────────────────────────────────────────────────────────


async def create_user(
    session: AsyncSession,
    name: str,
    email: str,
    password_hash: str,
) -> User:
    """Insert a user; a duplicate email surfaces as ``PersistenceError``."""
    user = User(name=name, email=email, password_hash=password_hash)
    session.add(user)
    await _commit(session, INSERT_FAILED)
    return user


async def get_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    return await _scalar(session, select(User).where(User.email == email))


async def get_user_by_id(session: AsyncSession, user_id: int) -> Optional[User]:
    return await _scalar(session, select(User).where(User.id == user_id))


# ── Products ────────────────────────────────────────────────────────────


async def create_product(
    session: AsyncSession,
    name: str,
    description: str,
    price: float,
) -> Product:
    product = Product(name=name, description=description, price=price)
    session.add(product)
    await _commit(session, INSERT_FAILED)
    logger.info("Created product %s (%s)", product.id, product.name)
    return product


async def list_products(session: AsyncSession) -> List[Product]:
    """All products ordered by id."""
    try:
        result = await session.execute(select(Product).order_by(Product.id.asc()))
    except SQLAlchemyError as exc:
        logger.exception("Listing products failed")
        raise PersistenceError(READ_FAILED) from exc
    return list(result.scalars().all())


async def get_product(session: AsyncSession, product_id: int) -> Optional[Product]:
    return await _scalar(session, select(Product).where(Product.id == product_id))


async def update_product(
    session: AsyncSession,
    product: Product,
    fields: Dict[str, Any],
) -> Product:
    """Apply ``fields`` onto an already-loaded product and save it."""
    for key, value in fields.items():
        setattr(product, key, value)
    await _commit(session, UPDATE_FAILED)
    logger.info("Updated product %s: %s", product.id, sorted(fields))
    return product


async def delete_product(session: AsyncSession, product: Product) -> None:
    await session.delete(product)
    await _commit(session, DELETE_FAILED)
    logger.info("Deleted product %s", product.id)
