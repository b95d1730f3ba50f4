from fastapi import Depends, Request

from Database.db import TicketingDB
from Database.deps import get_db
from Events.usecase import EventUsecase
from Orders.usecase import OrderUsecase
from settings import StatusPolicy
from Users.usecase import UserUsecase


def get_status_policy(request: Request) -> StatusPolicy:
    return request.app.state.settings.status_policy


def get_user_usecase(db: TicketingDB = Depends(get_db)) -> UserUsecase:
    return UserUsecase(db.users)


def get_event_usecase(db: TicketingDB = Depends(get_db)) -> EventUsecase:
    return EventUsecase(db.events)


def get_order_usecase(db: TicketingDB = Depends(get_db)) -> OrderUsecase:
    return OrderUsecase(db.orders, db.users, db.events)
