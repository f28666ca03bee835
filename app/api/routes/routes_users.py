# File: app/api/routes/routes_users.py

"""
User endpoints.

    POST   /api/users
    GET    /api/users
    GET    /api/users/{user_id}
    GET    /api/users/email/{email}
    PUT    /api/users/{user_id}
    DELETE /api/users/{user_id}
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.core.exceptions import NotFoundError, PersistenceError
from app.schemas.user import UserCreate, UserRead, UserUpdate
from app.services import user_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    logger.info("Received request to create user with email: %s", payload.email)
    try:
        return user_service.create_user(db, payload)
    except PersistenceError as exc:
        logger.error("Failed to create user: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("/{user_id}", response_model=UserRead, summary="Get user by id")
def get_user_by_id(user_id: int, db: Session = Depends(get_db)):
    logger.info("Received request to get user with id: %s", user_id)
    user = user_service.get_user_by_id(db, user_id)
    if user is None:
        logger.warning("User not found with id: %s", user_id)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return user


@router.get("", response_model=list[UserRead], summary="List users")
def get_all_users(db: Session = Depends(get_db)):
    logger.info("Received request to get all users")
    users = user_service.get_all_users(db)
    logger.info("Retrieved %d users", len(users))
    return users


@router.get("/email/{email}", response_model=UserRead, summary="Get user by email")
def get_user_by_email(email: str, db: Session = Depends(get_db)):
    logger.info("Received request to get user with email: %s", email)
    user = user_service.get_user_by_email(db, email)
    if user is None:
        logger.warning("User not found with email: %s", email)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return user


@router.put("/{user_id}", response_model=UserRead, summary="Update user")
def update_user(user_id: int, payload: UserUpdate, db: Session = Depends(get_db)):
    logger.info("Received request to update user with id: %s", user_id)
    try:
        return user_service.update_user(db, user_id, payload)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    except PersistenceError as exc:
        logger.error("Failed to update user with id: %s", user_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete user",
)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    logger.info("Received request to delete user with id: %s", user_id)
    try:
        user_service.delete_user(db, user_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    except PersistenceError as exc:
        logger.error("Failed to delete user with id: %s", user_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
