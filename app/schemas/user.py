# File: app/schemas/user.py

from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel


class UserBase(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class UserCreate(UserBase):
    pass


class UserUpdate(UserBase):
    pass


class UserRead(UserBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
