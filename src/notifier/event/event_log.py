"""Event log entries: immutable facts about CI resources.

Entries are written by the subsystems that own the resources (host
provisioning, volume management, task execution). The notifier only reads
them.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any
from uuid import uuid4


class ResourceType(Enum):
    HOST = "HOST"
    VOLUME = "VOLUME"
    TASK = "TASK"


class EventType(Enum):
    HOST_EXPIRATION_WARNING_SENT = "HOST_EXPIRATION_WARNING_SENT"
    VOLUME_EXPIRATION_WARNING_SENT = "VOLUME_EXPIRATION_WARNING_SENT"
    HOST_PROVISIONED = "HOST_PROVISIONED"
    TASK_FINISHED = "TASK_FINISHED"


@dataclass(frozen=True)
class EventLogEntry:
    """Something that happened to a resource."""

    resource_type: str
    resource_id: str
    event_type: str
    id: str = field(default_factory=lambda: uuid4().hex)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def log(cls, resource_type, resource_id, event_type, data=None, timestamp=None, event_id=None):
        """Build an entry from enum members or their string values."""
        return cls(
            id=event_id or uuid4().hex,
            resource_type=_value(resource_type),
            resource_id=str(resource_id),
            event_type=_value(event_type),
            timestamp=timestamp or datetime.now(UTC),
            data=dict(data or {}),
        )


def _value(member):
    return member.value if isinstance(member, Enum) else str(member)
