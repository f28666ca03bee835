# File: app/repositories/order_repository.py

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.order import Order


class OrderRepository:
    """Straight-through persistence for ``orders``; commits on every write."""

    def __init__(self, db: Session):
        self.db = db

    def save(self, order: Order) -> Order:
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order

    def find_by_id(self, order_id: int) -> Optional[Order]:
        return self.db.get(Order, order_id)

    def find_by_order_number(self, order_number: str) -> Optional[Order]:
        return self.db.scalar(select(Order).where(Order.order_number == order_number))

    def find_by_user_id(self, user_id: int) -> Sequence[Order]:
        return self.db.scalars(
            select(Order).where(Order.user_id == user_id).order_by(Order.id)
        ).all()

    def find_all(self) -> Sequence[Order]:
        return self.db.scalars(select(Order).order_by(Order.id)).all()

    def exists_by_id(self, order_id: int) -> bool:
        return self.db.scalar(select(Order.id).where(Order.id == order_id)) is not None

    def exists_by_order_number(self, order_number: str) -> bool:
        stmt = select(Order.id).where(Order.order_number == order_number)
        return self.db.scalar(stmt) is not None

    def delete_by_id(self, order_id: int) -> None:
        order = self.db.get(Order, order_id)
        if order is not None:
            self.db.delete(order)
            self.db.commit()
