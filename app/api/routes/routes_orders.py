# File: app/api/routes/routes_orders.py

"""
Order endpoints.

    POST   /api/orders
    GET    /api/orders
    GET    /api/orders/{order_id}
    GET    /api/orders/number/{order_number}
    GET    /api/orders/user/{user_id}
    PUT    /api/orders/{order_id}/status?status=SHIPPED
    PUT    /api/orders/{order_id}
    DELETE /api/orders/{order_id}
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.core.exceptions import NotFoundError, PersistenceError
from app.models.order import OrderStatus
from app.schemas.order import OrderCreate, OrderRead, OrderUpdate
from app.services import order_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found(exc: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.post(
    "",
    response_model=OrderRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create order",
)
def create_order(payload: OrderCreate, db: Session = Depends(get_db)):
    logger.info("Received request to create order for user: %s", payload.user_id)
    try:
        return order_service.create_order(db, payload)
    except PersistenceError as exc:
        logger.error("Failed to create order: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("/{order_id}", response_model=OrderRead, summary="Get order by id")
def get_order_by_id(order_id: int, db: Session = Depends(get_db)):
    logger.info("Received request to get order with id: %s", order_id)
    order = order_service.get_order_by_id(db, order_id)
    if order is None:
        logger.warning("Order not found with id: %s", order_id)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return order


@router.get("", response_model=list[OrderRead], summary="List orders")
def get_all_orders(db: Session = Depends(get_db)):
    logger.info("Received request to get all orders")
    orders = order_service.get_all_orders(db)
    logger.info("Retrieved %d orders", len(orders))
    return orders


@router.get(
    "/number/{order_number}",
    response_model=OrderRead,
    summary="Get order by order number",
)
def get_order_by_order_number(order_number: str, db: Session = Depends(get_db)):
    logger.info("Received request to get order with orderNumber: %s", order_number)
    order = order_service.get_order_by_order_number(db, order_number)
    if order is None:
        logger.warning("Order not found with orderNumber: %s", order_number)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return order


@router.get("/user/{user_id}", response_model=list[OrderRead], summary="List orders of a user")
def get_orders_by_user_id(user_id: int, db: Session = Depends(get_db)):
    logger.info("Received request to get orders for user: %s", user_id)
    orders = order_service.get_orders_by_user_id(db, user_id)
    logger.info("Retrieved %d orders for user: %s", len(orders), user_id)
    return orders


@router.put("/{order_id}/status", response_model=OrderRead, summary="Change order status")
def update_order_status(
    order_id: int,
    new_status: OrderStatus = Query(..., alias="status"),
    db: Session = Depends(get_db),
):
    logger.info(
        "Received request to update order status for id: %s to: %s",
        order_id,
        new_status.value,
    )
    try:
        return order_service.update_order_status(db, order_id, new_status)
    except NotFoundError as exc:
        raise _not_found(exc)
    except PersistenceError as exc:
        logger.error("Failed to update order status for id: %s", order_id)
        raise _not_found(exc)


@router.put("/{order_id}", response_model=OrderRead, summary="Update order details")
def update_order(order_id: int, payload: OrderUpdate, db: Session = Depends(get_db)):
    logger.info("Received request to update order with id: %s", order_id)
    try:
        return order_service.update_order(db, order_id, payload)
    except NotFoundError as exc:
        raise _not_found(exc)
    except PersistenceError as exc:
        logger.error("Failed to update order with id: %s", order_id)
        raise _not_found(exc)


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete order",
)
def delete_order(order_id: int, db: Session = Depends(get_db)):
    logger.info("Received request to delete order with id: %s", order_id)
    try:
        order_service.delete_order(db, order_id)
    except NotFoundError as exc:
        raise _not_found(exc)
    except PersistenceError as exc:
        logger.error("Failed to delete order with id: %s", order_id)
        raise _not_found(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
