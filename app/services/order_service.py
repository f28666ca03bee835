# File: app/services/order_service.py

"""
Order service.

Owns order-number generation and the two narrow update paths: status only,
or description/total only. Status changes are not checked against any
lifecycle; every status may move to every other status.
"""

import logging
import uuid
from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, PersistenceError
from app.models.order import Order, OrderStatus
from app.repositories.order_repository import OrderRepository
from app.schemas.order import OrderCreate, OrderUpdate

logger = logging.getLogger(__name__)

ORDER_NUMBER_PREFIX = "ORD-"
MAX_ORDER_NUMBER_ATTEMPTS = 5


def generate_order_number() -> str:
    return ORDER_NUMBER_PREFIX + uuid.uuid4().hex[:8].upper()


def _next_free_order_number(repo: OrderRepository) -> str:
    # The unique index on order_number is the real guard; this only avoids
    # a failed insert for the rare collision we can see up front.
    for _ in range(MAX_ORDER_NUMBER_ATTEMPTS):
        number = generate_order_number()
        if not repo.exists_by_order_number(number):
            return number
        logger.warning("Order number collision on %s, regenerating", number)
    raise PersistenceError("Could not allocate a unique order number")


def create_order(db: Session, payload: OrderCreate) -> Order:
    """
    Persist a new order.

    The order number is always generated here; a client-supplied one is
    ignored. Timestamps are set to now.
    """
    logger.info("Creating new order for user: %s", payload.user_id)
    repo = OrderRepository(db)

    try:
        order_number = _next_free_order_number(repo)
        now = datetime.now()
        order = Order(
            user_id=payload.user_id,
            order_number=order_number,
            status=payload.status or OrderStatus.PENDING,
            total_amount=payload.total_amount,
            description=payload.description,
            created_at=now,
            updated_at=now,
        )
        saved = repo.save(order)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Error creating order for user: %s", payload.user_id, exc_info=True)
        raise PersistenceError("Failed to create order") from exc

    logger.info(
        "Order created successfully with id: %s, orderNumber: %s",
        saved.id,
        saved.order_number,
    )
    return saved


def get_order_by_id(db: Session, order_id: int) -> Optional[Order]:
    logger.debug("Fetching order with id: %s", order_id)
    return OrderRepository(db).find_by_id(order_id)


def get_order_by_order_number(db: Session, order_number: str) -> Optional[Order]:
    logger.debug("Fetching order with orderNumber: %s", order_number)
    return OrderRepository(db).find_by_order_number(order_number)


def get_all_orders(db: Session) -> Sequence[Order]:
    logger.debug("Fetching all orders")
    return OrderRepository(db).find_all()


def get_orders_by_user_id(db: Session, user_id: int) -> Sequence[Order]:
    logger.debug("Fetching orders for user: %s", user_id)
    orders = OrderRepository(db).find_by_user_id(user_id)
    logger.debug("Found %d orders for user: %s", len(orders), user_id)
    return orders


def _load_or_raise(repo: OrderRepository, order_id: int) -> Order:
    order = repo.find_by_id(order_id)
    if order is None:
        logger.warning("Order not found with id: %s", order_id)
        raise NotFoundError("Order", order_id)
    return order


def _save(db: Session, repo: OrderRepository, order: Order) -> Order:
    try:
        return repo.save(order)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Error saving order with id: %s", order.id, exc_info=True)
        raise PersistenceError(f"Failed to update order {order.id}") from exc


def update_order_status(db: Session, order_id: int, new_status: OrderStatus) -> Order:
    logger.info("Updating order status for id: %s to status: %s", order_id, new_status.value)
    repo = OrderRepository(db)

    order = _load_or_raise(repo, order_id)
    old_status = order.status
    logger.debug("Order found, updating status from %s to %s", old_status, new_status)

    order.status = new_status
    order.updated_at = datetime.now()
    updated = _save(db, repo, order)

    logger.info(
        "Order status updated successfully. Id: %s, oldStatus: %s, newStatus: %s",
        order_id,
        old_status.value,
        new_status.value,
    )
    return updated


def update_order(db: Session, order_id: int, payload: OrderUpdate) -> Order:
    """
    Overwrite description and total_amount. Status and user_id are left alone.
    """
    logger.info("Updating order with id: %s", order_id)
    repo = OrderRepository(db)

    order = _load_or_raise(repo, order_id)
    order.description = payload.description
    order.total_amount = payload.total_amount
    order.updated_at = datetime.now()
    updated = _save(db, repo, order)

    logger.info("Order updated successfully with id: %s", order_id)
    return updated


def delete_order(db: Session, order_id: int) -> None:
    logger.info("Deleting order with id: %s", order_id)
    repo = OrderRepository(db)

    if not repo.exists_by_id(order_id):
        logger.warning("Order not found for deletion with id: %s", order_id)
        raise NotFoundError("Order", order_id)

    try:
        repo.delete_by_id(order_id)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Error deleting order with id: %s", order_id, exc_info=True)
        raise PersistenceError(f"Failed to delete order {order_id}") from exc

    logger.info("Order deleted successfully with id: %s", order_id)
