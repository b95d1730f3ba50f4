'''
This file contains the storage for the Ticketing System.
'''
from datetime import date
from typing import Callable, Optional

from Events.repository import EventRepository
from Orders.repository import OrderRepository
from Users.repository import UserRepository


class TicketingDB:
    """Process-wide in-memory storage, one repository per entity.

    Nothing is persisted: every record is lost when the process exits.
    """

    def __init__(self, today: Optional[Callable[[], date]] = None):
        self.users = UserRepository()
        self.events = EventRepository()
        self.orders = OrderRepository(today=today)
