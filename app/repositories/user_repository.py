# File: app/repositories/user_repository.py

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.user import User


class UserRepository:
    """Straight-through persistence for ``users``; commits on every write."""

    def __init__(self, db: Session):
        self.db = db

    def save(self, user: User) -> User:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.scalar(select(User).where(User.email == email))

    def find_all(self) -> Sequence[User]:
        return self.db.scalars(select(User).order_by(User.id)).all()

    def exists_by_id(self, user_id: int) -> bool:
        return self.db.scalar(select(User.id).where(User.id == user_id)) is not None

    def delete_by_id(self, user_id: int) -> None:
        user = self.db.get(User, user_id)
        if user is not None:
            self.db.delete(user)
            self.db.commit()
