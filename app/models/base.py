# File: app/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Concrete tables (User, Order) inherit from this so their metadata is
    collected in one place for ``init_db``.
    """
    pass
