from Database.store import InMemoryStore
from Events.event import Event


class EventRepository(InMemoryStore[Event]):
    """In-memory event table."""

    entity_name = "event"
