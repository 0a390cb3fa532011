"""Notification aggregate: a rendered, channel-ready message.

Each notification is the product of one (event, subscription) pair. Its id
is derived from the event id, subscription id, and trigger name, so a
delivery collaborator can recognise redeliveries.

State Machine:
    PENDING → SENT
    PENDING → FAILED
"""

import json
from dataclasses import asdict
from datetime import UTC, datetime
from enum import Enum

from notifier.domain import notifier
from notifier.notification.events import NotificationCreated, NotificationFailed, NotificationSent
from notifier.templates.payloads import EmailPayload, JiraIssuePayload, SlackPayload
from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text


class NotificationStatus(Enum):
    PENDING = "Pending"
    SENT = "Sent"
    FAILED = "Failed"


_VALID_TRANSITIONS = {
    NotificationStatus.PENDING: {
        NotificationStatus.SENT,
        NotificationStatus.FAILED,
    },
    NotificationStatus.SENT: set(),  # Terminal
    NotificationStatus.FAILED: set(),  # Terminal; retries belong to the delivery collaborator
}


def notification_id(event_id: str, subscription_id: str, trigger: str) -> str:
    return f"{event_id}-{subscription_id}-{trigger}"


@notifier.aggregate
class Notification:
    # Origin
    event_id: String(required=True, max_length=255)
    subscription_id: String(required=True, max_length=255)
    trigger: String(required=True, max_length=100)

    # Subscriber
    subscriber_type: String(required=True, max_length=50)
    target: String(required=True, max_length=500)

    # Content
    subject: String(max_length=500)
    body: Text(required=True)
    payload: Text()  # JSON of the channel payload

    # Status
    status: String(choices=NotificationStatus, default=NotificationStatus.PENDING.value)
    failure_reason: String(max_length=500)

    # Timestamps
    created_at: DateTime()
    sent_at: DateTime()
    updated_at: DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, event_id, subscription_id, trigger, subscriber_type, target, payload):
        """Wrap a rendered channel payload into a PENDING notification."""
        subject, body = _subject_and_body(payload)
        now = datetime.now(UTC)

        notification = cls(
            id=notification_id(event_id, subscription_id, trigger),
            event_id=event_id,
            subscription_id=subscription_id,
            trigger=trigger,
            subscriber_type=subscriber_type,
            target=target,
            subject=subject,
            body=body,
            payload=json.dumps(asdict(payload)),
            status=NotificationStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )

        notification.raise_(
            NotificationCreated(
                notification_id=notification.id,
                event_id=event_id,
                subscription_id=subscription_id,
                trigger=trigger,
                subscriber_type=subscriber_type,
                target=target,
                created_at=now,
            )
        )

        return notification

    def get_payload(self) -> dict:
        return json.loads(self.payload) if self.payload else {}

    # -------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        current = NotificationStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def mark_sent(self, sent_at=None):
        self._assert_can_transition(NotificationStatus.SENT)

        now = sent_at or datetime.now(UTC)
        self.status = NotificationStatus.SENT.value
        self.sent_at = now
        self.updated_at = now

        self.raise_(
            NotificationSent(
                notification_id=self.id,
                subscriber_type=self.subscriber_type,
                sent_at=now,
            )
        )

    def mark_failed(self, reason):
        self._assert_can_transition(NotificationStatus.FAILED)

        now = datetime.now(UTC)
        self.status = NotificationStatus.FAILED.value
        self.failure_reason = reason
        self.updated_at = now

        self.raise_(
            NotificationFailed(
                notification_id=self.id,
                subscriber_type=self.subscriber_type,
                reason=reason,
                failed_at=now,
            )
        )


def _subject_and_body(payload):
    if isinstance(payload, EmailPayload):
        return payload.subject, payload.body
    if isinstance(payload, SlackPayload):
        return None, payload.body
    if isinstance(payload, JiraIssuePayload):
        return payload.summary, payload.description
    raise ValueError(f"Unknown payload type: {type(payload).__name__}")
