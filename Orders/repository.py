from datetime import date
from typing import Callable, Optional

from Database.store import InMemoryStore
from Orders.order import Order
from utils import format_date


class OrderRepository(InMemoryStore[Order]):
    """
    In-memory order table.

    Orders are stamped with the creation day; updates keep that stamp.

    Args:
        today: Clock returning the current day, ``date.today`` by default.
    """

    entity_name = "order"

    def __init__(self, today: Optional[Callable[[], date]] = None) -> None:
        super().__init__()
        self._today = today or date.today

    def _prepare_create(self, record: Order) -> Order:
        record.date = format_date(self._today())
        return record

    def _prepare_update(self, current: Order, record: Order) -> Order:
        record.date = current.date
        return record
