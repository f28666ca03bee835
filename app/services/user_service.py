# File: app/services/user_service.py

"""
User service.

Timestamps records, applies partial updates and signals absence with
NotFoundError. Lookups return None instead of raising.
"""

import logging
from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, PersistenceError
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


def create_user(db: Session, payload: UserCreate) -> User:
    """
    Persist a new user with created_at/updated_at set to now.

    Any storage failure (duplicate email included) is rolled back and
    re-raised as PersistenceError.
    """
    logger.info("Creating new user with email: %s", payload.email)
    now = datetime.now()
    user = User(
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
        created_at=now,
        updated_at=now,
    )

    try:
        saved = UserRepository(db).save(user)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Error creating user with email: %s", payload.email, exc_info=True)
        raise PersistenceError("Failed to create user") from exc

    logger.info("User created successfully with id: %s", saved.id)
    return saved


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    logger.debug("Fetching user with id: %s", user_id)
    return UserRepository(db).find_by_id(user_id)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    logger.debug("Fetching user with email: %s", email)
    return UserRepository(db).find_by_email(email)


def get_all_users(db: Session) -> Sequence[User]:
    logger.debug("Fetching all users")
    return UserRepository(db).find_all()


def update_user(db: Session, user_id: int, payload: UserUpdate) -> User:
    """
    Overwrite name, email and phone of an existing user.

    Fields are overwritten as given, so omitting one clears it.
    """
    logger.info("Updating user with id: %s", user_id)
    repo = UserRepository(db)

    user = repo.find_by_id(user_id)
    if user is None:
        logger.warning("User not found with id: %s", user_id)
        raise NotFoundError("User", user_id)

    user.name = payload.name
    user.email = payload.email
    user.phone = payload.phone
    user.updated_at = datetime.now()

    try:
        updated = repo.save(user)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Error updating user with id: %s", user_id, exc_info=True)
        raise PersistenceError(f"Failed to update user {user_id}") from exc

    logger.info("User updated successfully with id: %s", user_id)
    return updated


def delete_user(db: Session, user_id: int) -> None:
    logger.info("Deleting user with id: %s", user_id)
    repo = UserRepository(db)

    if not repo.exists_by_id(user_id):
        logger.warning("User not found for deletion with id: %s", user_id)
        raise NotFoundError("User", user_id)

    try:
        repo.delete_by_id(user_id)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Error deleting user with id: %s", user_id, exc_info=True)
        raise PersistenceError(f"Failed to delete user {user_id}") from exc

    logger.info("User deleted successfully with id: %s", user_id)
