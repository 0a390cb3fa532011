"""Event handler registry: maps resource types to trigger factories.

The registry is filled once at import and frozen; lookups never race with
registration.
"""

import structlog
from notifier.errors import UnsupportedResourceType
from notifier.event.event_log import EventType, ResourceType
from notifier.trigger.host import HostTriggers
from notifier.trigger.volume import VolumeTriggers

logger = structlog.get_logger(__name__)


def _value(member):
    return getattr(member, "value", member)


class EventHandlerRegistry:
    def __init__(self):
        self._by_resource_type: dict[str, object] = {}
        self._by_event_type: dict[tuple[str, str], object] = {}
        self._frozen = False

    def register(self, resource_type, factory, event_type=None) -> None:
        """Register ``factory`` for a resource type, or for one of its event types."""
        if self._frozen:
            raise RuntimeError("Cannot register trigger factories after the registry is frozen")

        resource_type = _value(resource_type)
        if event_type is None:
            self._by_resource_type[resource_type] = factory
        else:
            self._by_event_type[(resource_type, _value(event_type))] = factory

    def freeze(self) -> "EventHandlerRegistry":
        self._frozen = True
        return self

    def resolve(self, resource_type, event_type=None):
        """Return the trigger factory for an event.

        Event-type registrations take precedence over resource-type ones.
        """
        resource_type = _value(resource_type)
        if event_type is not None:
            factory = self._by_event_type.get((resource_type, _value(event_type)))
            if factory is not None:
                return factory

        factory = self._by_resource_type.get(resource_type)
        if factory is None:
            raise UnsupportedResourceType(resource_type, event_type)
        return factory


def build_default_registry() -> EventHandlerRegistry:
    registry = EventHandlerRegistry()
    registry.register(ResourceType.HOST, HostTriggers.make)
    registry.register(ResourceType.VOLUME, VolumeTriggers.make)
    # Volume warnings are logged against the host resource type.
    registry.register(ResourceType.HOST, VolumeTriggers.make, event_type=EventType.VOLUME_EXPIRATION_WARNING_SENT)
    return registry.freeze()


DEFAULT_REGISTRY = build_default_registry()