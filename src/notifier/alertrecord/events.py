"""Domain events for the AlertRecord aggregate."""

from notifier.domain import notifier
from protean.fields import DateTime, Identifier, String


@notifier.event(part_of="AlertRecord")
class AlertRecorded:
    """An alert was claimed; repeats for the same key are suppressed."""

    __version__ = 1

    record_key: Identifier(required=True)
    resource_id: String(required=True)
    alert_type: String(required=True)
    discriminator: String()
    recorded_at: DateTime(required=True)
