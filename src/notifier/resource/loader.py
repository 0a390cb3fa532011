"""Entity loader port and its repository-backed adapter.

Triggers are bound to the entity an event refers to. The loader resolves an
event to that entity; a missing entity surfaces as ``EntityNotFound``.
"""

from abc import ABC, abstractmethod

from notifier.errors import EntityNotFound, LookupFailed
from notifier.event.event_log import EventLogEntry, EventType, ResourceType
from notifier.resource.host import Host
from notifier.resource.task import Task
from notifier.resource.volume import Volume
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

_AGGREGATES = {
    ResourceType.HOST.value: Host,
    ResourceType.VOLUME.value: Volume,
    ResourceType.TASK.value: Task,
}

# Volume warnings are logged against the host resource type.
_EVENT_AGGREGATES = {
    EventType.VOLUME_EXPIRATION_WARNING_SENT.value: Volume,
}


class EntityLoader(ABC):
    """Abstract interface for loading the entity an event refers to."""

    @abstractmethod
    def load_entity(self, event: EventLogEntry):
        """Return the entity, or raise ``EntityNotFound``."""
        ...


class RepositoryEntityLoader(EntityLoader):
    """Loads entities from the notifier domain's repositories."""

    def load_entity(self, event: EventLogEntry):
        aggregate_cls = _EVENT_AGGREGATES.get(event.event_type) or _AGGREGATES.get(event.resource_type)
        if aggregate_cls is None:
            raise EntityNotFound(event.resource_type, event.resource_id)

        repo = current_domain.repository_for(aggregate_cls)
        try:
            return repo.get(event.resource_id)
        except ObjectNotFoundError:
            raise EntityNotFound(aggregate_cls.__name__, event.resource_id) from None
        except Exception as e:
            raise LookupFailed(f"loading {aggregate_cls.__name__} '{event.resource_id}': {e}") from e


_loader: EntityLoader | None = None


def get_entity_loader() -> EntityLoader:
    global _loader
    if _loader is None:
        _loader = RepositoryEntityLoader()
    return _loader


def set_entity_loader(loader: EntityLoader) -> None:
    global _loader
    _loader = loader


def reset_entity_loader() -> None:
    global _loader
    _loader = None
