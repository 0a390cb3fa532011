"""Domain events for the Subscription aggregate."""

from notifier.domain import notifier
from protean.fields import DateTime, Identifier, String


@notifier.event(part_of="Subscription")
class SubscriptionCreated:
    """A user subscribed to a trigger on a resource type."""

    __version__ = 1

    subscription_id: Identifier(required=True)
    owner: String()
    resource_type: String(required=True)
    trigger: String(required=True)
    subscriber_type: String(required=True)
    created_at: DateTime(required=True)
