"""Tests for the in-memory repositories."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import date
from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from errors import NotFoundError  # noqa: E402
from Events.event import Event  # noqa: E402
from Events.repository import EventRepository  # noqa: E402
from Orders.order import Order  # noqa: E402
from Orders.repository import OrderRepository  # noqa: E402
from Users.repository import UserRepository  # noqa: E402
from Users.user import User  # noqa: E402


FIXED_DAY = date(2024, 5, 17)


@pytest.fixture()
def orders() -> OrderRepository:
    return OrderRepository(today=lambda: FIXED_DAY)


def test_sequential_events_get_increasing_ids_and_are_otherwise_unchanged() -> None:
    repository = EventRepository()
    payloads = [Event(title=f"Show {n}", date="2024-07-01", location="Arena") for n in range(5)]

    created = [repository.create(payload) for payload in payloads]

    assert [event.id for event in created] == [1, 2, 3, 4, 5]
    for payload, event in zip(payloads, created):
        assert event.model_dump(exclude={"id"}) == payload.model_dump(exclude={"id"})


def test_create_ignores_client_supplied_id() -> None:
    repository = EventRepository()

    created = repository.create(Event(id=42, title="Show", date="2024-07-01"))

    assert created.id == 1


def test_two_sequential_orders_get_ids_one_and_two_and_todays_date(orders: OrderRepository) -> None:
    first = orders.create(Order(user_id=1, event_id=1))
    second = orders.create(Order(user_id=2, event_id=1))

    assert (first.id, second.id) == (1, 2)
    assert first.date == second.date == "2024-05-17"


def test_order_date_defaults_to_the_current_day() -> None:
    created = OrderRepository().create(Order(user_id=1, event_id=1))

    assert len(created.date) == 10
    assert created.date.count("-") == 2


def test_list_returns_every_order_once(orders: OrderRepository) -> None:
    for user_id in range(1, 11):
        orders.create(Order(user_id=user_id, event_id=1))

    listed = orders.list()

    assert [order.id for order in listed] == list(range(1, 11))
    assert [order.user_id for order in listed] == list(range(1, 11))


def test_concurrent_creates_never_collide(orders: OrderRepository) -> None:
    total = 200

    with ThreadPoolExecutor(max_workers=16) as pool:
        created = list(pool.map(lambda n: orders.create(Order(user_id=n, event_id=1)), range(1, total + 1)))

    assert sorted(order.id for order in created) == list(range(1, total + 1))
    assert len(orders) == total
    assert sorted(order.user_id for order in orders.list()) == list(range(1, total + 1))


def test_deleted_ids_are_not_reused() -> None:
    repository = UserRepository()
    first = repository.create(User(name="Ada", email="ada@example.com"))
    repository.create(User(name="Bob", email="bob@example.com"))

    assert repository.delete(first.id) is True
    third = repository.create(User(name="Carol", email="carol@example.com"))

    assert third.id == 3
    assert [user.id for user in repository.list()] == [2, 3]


def test_get_update_and_delete_raise_not_found_for_unknown_ids() -> None:
    repository = UserRepository()

    with pytest.raises(NotFoundError, match="User with id 7 not found"):
        repository.get(7)
    with pytest.raises(NotFoundError):
        repository.update(User(id=7, name="Ada", email="ada@example.com"))
    with pytest.raises(NotFoundError):
        repository.delete(7)


def test_returned_records_are_copies() -> None:
    repository = UserRepository()
    created = repository.create(User(name="Ada", email="ada@example.com"))

    created.name = "Mutated"

    assert repository.get(created.id).name == "Ada"


def test_update_keeps_order_creation_date() -> None:
    days = iter([date(2024, 1, 1), date(2024, 2, 2)])
    repository = OrderRepository(today=lambda: next(days))
    created = repository.create(Order(user_id=1, event_id=1))

    updated = repository.update(Order(id=created.id, user_id=1, event_id=1, quantity=4, date="1999-01-01"))

    assert updated.quantity == 4
    assert updated.date == "2024-01-01"


def test_find_by_email_is_case_insensitive() -> None:
    repository = UserRepository()
    created = repository.create(User(name="Ada", email="ada@example.com"))

    assert repository.find_by_email("ADA@example.com ") == created
    assert repository.find_by_email("bob@example.com") is None
