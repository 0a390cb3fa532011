"""Notification assembler: one rendered Notification per matched subscriber."""

import structlog
from notifier.event.event_log import EventLogEntry
from notifier.notification.notification import Notification
from notifier.subscription.subscription import Subscription
from notifier.templates import render
from notifier.templates.payloads import TemplateData

logger = structlog.get_logger(__name__)


def assemble(subscription: Subscription, event: EventLogEntry, data: TemplateData | None) -> list[Notification]:
    """Render ``data`` for the subscription's channel.

    Returns an empty list when the trigger did not fire.
    """
    if data is None:
        return []

    payload = render(subscription.subscriber_type, data, subscription.subscriber_target)
    notification = Notification.create(
        event_id=event.id,
        subscription_id=str(subscription.id),
        trigger=subscription.trigger,
        subscriber_type=subscription.subscriber_type,
        target=subscription.subscriber_target,
        payload=payload,
    )

    logger.debug(
        "Notification assembled",
        notification_id=notification.id,
        subscriber_type=subscription.subscriber_type,
    )

    return [notification]
