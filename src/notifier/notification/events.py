"""Domain events for the Notification aggregate."""

from notifier.domain import notifier
from protean.fields import DateTime, Identifier, String


@notifier.event(part_of="Notification")
class NotificationCreated:
    """A notification was rendered for a matched subscription."""

    __version__ = 1

    notification_id: Identifier(required=True)
    event_id: String(required=True)
    subscription_id: String(required=True)
    trigger: String(required=True)
    subscriber_type: String(required=True)
    target: String(required=True)
    created_at: DateTime(required=True)


@notifier.event(part_of="Notification")
class NotificationSent:
    """The delivery sink handed the notification to its channel."""

    __version__ = 1

    notification_id: Identifier(required=True)
    subscriber_type: String(required=True)
    sent_at: DateTime(required=True)


@notifier.event(part_of="Notification")
class NotificationFailed:
    """The channel rejected the notification."""

    __version__ = 1

    notification_id: Identifier(required=True)
    subscriber_type: String(required=True)
    reason: String(required=True)
    failed_at: DateTime(required=True)
