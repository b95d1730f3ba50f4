"""Business rules for orders."""
import logging

from errors import InvalidPayloadError
from Events.repository import EventRepository
from Orders.order import Order, validate_order
from Orders.repository import OrderRepository
from Users.repository import UserRepository

logger = logging.getLogger(__name__)


class OrderUsecase:
    """
    Orchestrates order storage.

    Args:
        repository: Order table.
        users: User table, used to check the ordering user exists.
        events: Event table, used to check the ordered event exists.
    """

    def __init__(
        self,
        repository: OrderRepository,
        users: UserRepository,
        events: EventRepository,
    ) -> None:
        self.repository = repository
        self.users = users
        self.events = events

    def _check(self, order: Order) -> None:
        errors = validate_order(order)
        if errors:
            raise InvalidPayloadError(errors, data=order)
        # both raise NotFoundError
        self.users.get(order.user_id)
        self.events.get(order.event_id)

    def create_order(self, order: Order) -> Order:
        self._check(order)
        created = self.repository.create(order)
        logger.info(
            "Order created",
            extra={"order_id": created.id, "user_id": created.user_id, "event_id": created.event_id},
        )
        return created

    def list_orders(self) -> list[Order]:
        return self.repository.list()

    def get_order(self, order_id: int) -> Order:
        return self.repository.get(order_id)

    def update_order(self, order: Order) -> Order:
        self._check(order)
        updated = self.repository.update(order)
        logger.info("Order updated", extra={"order_id": updated.id})
        return updated

    def delete_order(self, order_id: int) -> bool:
        deleted = self.repository.delete(order_id)
        logger.info("Order deleted", extra={"order_id": order_id})
        return deleted
