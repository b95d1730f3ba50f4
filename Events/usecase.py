import logging

from errors import InvalidPayloadError
from Events.event import Event, validate_event
from Events.repository import EventRepository

logger = logging.getLogger(__name__)


class EventUsecase:

    def __init__(self, repository: EventRepository) -> None:
        self.repository = repository

    def create_event(self, event: Event) -> Event:
        '''Validate and store an event, returning it with its new id.'''
        errors = validate_event(event)
        if errors:
            raise InvalidPayloadError(errors, data=event)
        created = self.repository.create(event)
        logger.info("Event created", extra={"event_id": created.id})
        return created

    def list_events(self) -> list[Event]:
        return self.repository.list()

    def get_event(self, event_id: int) -> Event:
        return self.repository.get(event_id)
