# File: tests/test_services.py

"""
Service-layer behaviour that is awkward to observe through HTTP:
field isolation on the narrow update paths and failure types.
"""

import re
from decimal import Decimal
from unittest import mock

import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import NotFoundError, PersistenceError
from app.models.order import OrderStatus
from app.repositories.order_repository import OrderRepository
from app.schemas.order import OrderCreate, OrderUpdate
from app.schemas.user import UserCreate, UserUpdate
from app.services import order_service, user_service


@pytest.fixture
def order(db_session):
    return order_service.create_order(
        db_session,
        OrderCreate(user_id=1, total_amount=Decimal("99.99"), description="Test order"),
    )


def test_generate_order_number_format():
    for _ in range(50):
        assert re.fullmatch(r"ORD-[A-F0-9]{8}", order_service.generate_order_number())


def test_create_order_regenerates_colliding_number(db_session, order):
    numbers = iter([order.order_number, "ORD-0000ABCD"])
    with mock.patch.object(order_service, "generate_order_number", side_effect=lambda: next(numbers)):
        second = order_service.create_order(db_session, OrderCreate(user_id=2))
    assert second.order_number == "ORD-0000ABCD"


def test_create_order_gives_up_after_repeated_collisions(db_session, order):
    with mock.patch.object(order_service, "generate_order_number", return_value=order.order_number):
        with pytest.raises(PersistenceError):
            order_service.create_order(db_session, OrderCreate(user_id=2))


def test_create_order_wraps_storage_errors(db_session):
    boom = OperationalError("INSERT", {}, Exception("database is locked"))
    with mock.patch.object(OrderRepository, "save", side_effect=boom):
        with pytest.raises(PersistenceError, match="Failed to create order") as excinfo:
            order_service.create_order(db_session, OrderCreate(user_id=1))
    assert excinfo.value.__cause__ is boom


def test_update_order_status_touches_only_status(db_session, order):
    snapshot = (order.user_id, order.order_number, order.total_amount, order.description, order.created_at)
    old_updated = order.updated_at

    updated = order_service.update_order_status(db_session, order.id, OrderStatus.SHIPPED)

    assert updated.status is OrderStatus.SHIPPED
    assert updated.updated_at >= old_updated
    assert (
        updated.user_id,
        updated.order_number,
        updated.total_amount,
        updated.description,
        updated.created_at,
    ) == snapshot


def test_update_order_leaves_status_and_user(db_session, order):
    order_service.update_order_status(db_session, order.id, OrderStatus.PROCESSING)

    updated = order_service.update_order(
        db_session, order.id, OrderUpdate(description="new", total_amount=Decimal("10.50"))
    )

    assert updated.description == "new"
    assert updated.total_amount == Decimal("10.50")
    assert updated.status is OrderStatus.PROCESSING
    assert updated.user_id == 1


def test_order_mutations_on_missing_id_raise_not_found(db_session):
    with pytest.raises(NotFoundError):
        order_service.update_order_status(db_session, 42, OrderStatus.CONFIRMED)
    with pytest.raises(NotFoundError):
        order_service.update_order(db_session, 42, OrderUpdate(description="x"))
    with pytest.raises(NotFoundError):
        order_service.delete_order(db_session, 42)


def test_order_lookups_return_none_when_absent(db_session):
    assert order_service.get_order_by_id(db_session, 42) is None
    assert order_service.get_order_by_order_number(db_session, "ORD-00000000") is None
    assert list(order_service.get_orders_by_user_id(db_session, 42)) == []


def test_user_create_update_delete(db_session):
    user = user_service.create_user(db_session, UserCreate(name="Ann", email="ann@example.com"))
    assert user.id is not None
    assert user.created_at == user.updated_at

    updated = user_service.update_user(
        db_session, user.id, UserUpdate(name="Ann B", email="annb@example.com", phone="1")
    )
    assert (updated.name, updated.email, updated.phone) == ("Ann B", "annb@example.com", "1")
    assert user_service.get_user_by_email(db_session, "annb@example.com").id == user.id

    user_service.delete_user(db_session, user.id)
    assert user_service.get_user_by_id(db_session, user.id) is None


def test_user_mutations_on_missing_id_raise_not_found(db_session):
    with pytest.raises(NotFoundError) as excinfo:
        user_service.update_user(db_session, 7, UserUpdate(name="x"))
    assert excinfo.value.entity == "User"
    assert excinfo.value.key == 7

    with pytest.raises(NotFoundError):
        user_service.delete_user(db_session, 7)


def test_duplicate_email_raises_persistence_error_and_session_stays_usable(db_session):
    user_service.create_user(db_session, UserCreate(name="A", email="dup@example.com"))
    with pytest.raises(PersistenceError):
        user_service.create_user(db_session, UserCreate(name="B", email="dup@example.com"))

    assert len(user_service.get_all_users(db_session)) == 1
