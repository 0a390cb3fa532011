"""Delivery sink: hands rendered notifications to channel adapters.

The sink owns transmission and delivery status. It never retries; a failed
notification is marked FAILED and logged.
"""

from abc import ABC, abstractmethod

import structlog
from notifier.channel import get_channel
from notifier.notification.notification import Notification
from notifier.subscription.subscription import SubscriberType

logger = structlog.get_logger(__name__)


class DeliverySink(ABC):
    @abstractmethod
    def deliver(self, notifications: list[Notification]) -> None:
        ...


class ChannelDeliverySink(DeliverySink):
    """Routes each notification to the adapter for its subscriber type."""

    def deliver(self, notifications: list[Notification]) -> None:
        for notification in notifications:
            try:
                adapter = get_channel(notification.subscriber_type)
            except ValueError as e:
                notification.mark_failed(str(e))
                logger.error(
                    "No channel adapter for notification",
                    notification_id=notification.id,
                    subscriber_type=notification.subscriber_type,
                )
                continue

            result = _dispatch_via_channel(adapter, notification)
            if result.get("status") == "sent":
                notification.mark_sent()
            else:
                notification.mark_failed(result.get("error", "Unknown dispatch error"))
                logger.error(
                    "Notification delivery failed",
                    notification_id=notification.id,
                    subscriber_type=notification.subscriber_type,
                    error=notification.failure_reason,
                )


def _dispatch_via_channel(adapter, notification: Notification) -> dict:
    """Route dispatch to the correct adapter method based on subscriber type."""
    subscriber_type = notification.subscriber_type
    payload = notification.get_payload()

    if subscriber_type == SubscriberType.EMAIL.value:
        return adapter.send(
            to=notification.target,
            subject=notification.subject or "",
            body=notification.body,
            headers=payload.get("headers"),
        )
    elif subscriber_type == SubscriberType.SLACK.value:
        return adapter.send(
            channel=notification.target,
            message=notification.body,
            attachments=payload.get("attachments"),
        )
    elif subscriber_type == SubscriberType.JIRA_ISSUE.value:
        result = adapter.create_ticket(
            {
                "project": {"key": payload["project"]},
                "issuetype": {"name": payload["issue_type"]},
                "summary": payload["summary"],
                "description": payload["description"],
            }
        )
        if result.success:
            return {"message_id": result.key, "status": "sent"}
        return {"message_id": None, "status": "failed", "error": result.failure_reason}
    else:
        return {"status": "failed", "error": f"Unknown subscriber type: {subscriber_type}"}


_sink: DeliverySink | None = None


def get_delivery_sink() -> DeliverySink:
    global _sink
    if _sink is None:
        _sink = ChannelDeliverySink()
    return _sink


def set_delivery_sink(sink: DeliverySink) -> None:
    global _sink
    _sink = sink


def reset_delivery_sink() -> None:
    global _sink
    _sink = None
