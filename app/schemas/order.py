# File: app/schemas/order.py

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import PlainSerializer

from app.models.order import OrderStatus
from app.schemas.base import CamelModel

# Emitted as a JSON number rather than pydantic's default decimal string
_as_number = PlainSerializer(float, return_type=float, when_used="json")
Money = Annotated[Decimal, _as_number]


class OrderCreate(CamelModel):
    user_id: Optional[int] = None
    # Accepted so clients can round-trip an order body; always replaced on create
    order_number: Optional[str] = None
    status: OrderStatus = OrderStatus.PENDING
    total_amount: Optional[Money] = None
    description: Optional[str] = None


class OrderUpdate(CamelModel):
    total_amount: Optional[Money] = None
    description: Optional[str] = None


class OrderRead(CamelModel):
    id: int
    user_id: Optional[int] = None
    order_number: str
    status: OrderStatus
    total_amount: Optional[Money] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
