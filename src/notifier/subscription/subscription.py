"""Subscription aggregate: a user rule binding selectors to a channel.

A subscription names a resource type, a trigger (e.g. "expiration"), an
ordered list of selectors that must all match the event, and a subscriber
(channel type + target). The dispatch pipeline reads subscriptions but never
modifies them.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from notifier.domain import notifier
from notifier.subscription.events import SubscriptionCreated
from notifier.subscription.selector import Selector, SelectorType
from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text


class SubscriberType(Enum):
    EMAIL = "email"
    SLACK = "slack"
    JIRA_ISSUE = "jira-issue"


class TriggerName(Enum):
    EXPIRATION = "expiration"


@notifier.aggregate
class Subscription:
    owner: String(max_length=100)
    resource_type: String(required=True, max_length=50)
    trigger: String(required=True, max_length=100)

    # Selectors
    selectors: Text()  # JSON list of {type, data}

    # Subscriber
    subscriber_type: String(choices=SubscriberType, required=True)
    subscriber_target: String(required=True, max_length=500)

    created_at: DateTime()

    # -------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, resource_type, trigger, selectors, subscriber_type, subscriber_target, owner=None):
        """Create a subscription. At least one selector is required."""
        selectors = list(selectors)
        if not selectors:
            raise ValidationError({"selectors": ["A subscription must have at least one selector"]})

        now = datetime.now(UTC)
        subscription = cls(
            owner=owner,
            resource_type=_value(resource_type),
            trigger=_value(trigger),
            selectors=json.dumps([s.to_dict() for s in selectors]),
            subscriber_type=_value(subscriber_type),
            subscriber_target=subscriber_target,
            created_at=now,
        )

        subscription.raise_(
            SubscriptionCreated(
                subscription_id=str(subscription.id),
                owner=owner,
                resource_type=subscription.resource_type,
                trigger=subscription.trigger,
                subscriber_type=subscription.subscriber_type,
                created_at=now,
            )
        )

        return subscription

    @classmethod
    def by_id(cls, resource_type, trigger, resource_id, subscriber_type, subscriber_target, owner=None):
        """Subscribe to a single resource, identified by its id."""
        return cls.create(
            resource_type=resource_type,
            trigger=trigger,
            selectors=[Selector.of(SelectorType.ID, resource_id)],
            subscriber_type=subscriber_type,
            subscriber_target=subscriber_target,
            owner=owner,
        )

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def get_selectors(self) -> list[Selector]:
        items = json.loads(self.selectors) if self.selectors else []
        return [Selector(type=item["type"], data=item["data"]) for item in items]


def _value(member):
    return member.value if isinstance(member, Enum) else member
