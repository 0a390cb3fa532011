import pytest
from notifier.notification.events import NotificationCreated, NotificationFailed, NotificationSent
from notifier.notification.notification import Notification, NotificationStatus, notification_id
from notifier.templates.payloads import EmailPayload, JiraIssuePayload, SlackPayload
from protean.exceptions import ValidationError


def _email_notification(**overrides):
    defaults = {
        "event_id": "e0",
        "subscription_id": "s0",
        "trigger": "expiration",
        "subscriber_type": "email",
        "target": "foo@bar.com",
        "payload": EmailPayload(subject="Volume v0 termination reminder", body="Your volume...", headers={"X-Evergreen-id": "v0"}),
    }
    defaults.update(overrides)
    return Notification.create(**defaults)


class TestNotificationCreation:
    def test_id_is_derived_from_origin(self):
        notification = _email_notification()
        assert notification.id == notification_id("e0", "s0", "expiration") == "e0-s0-expiration"

    def test_starts_pending(self):
        notification = _email_notification()
        assert notification.status == NotificationStatus.PENDING.value
        assert notification.created_at is not None

    def test_email_subject_and_body(self):
        notification = _email_notification()
        assert notification.subject == "Volume v0 termination reminder"
        assert notification.body == "Your volume..."
        assert notification.get_payload()["headers"] == {"X-Evergreen-id": "v0"}

    def test_slack_has_no_subject(self):
        notification = _email_notification(
            subscriber_type="slack",
            target="#ops",
            payload=SlackPayload(body="hello", attachments=[{"title": "Volume v0"}]),
        )
        assert notification.subject is None
        assert notification.get_payload()["attachments"] == [{"title": "Volume v0"}]

    def test_jira_issue_uses_summary_and_description(self):
        notification = _email_notification(
            subscriber_type="jira-issue",
            target="OPS",
            payload=JiraIssuePayload(project="OPS", issue_type="Build Failure", summary="s", description="d"),
        )
        assert notification.subject == "s"
        assert notification.body == "d"

    def test_unknown_payload_rejected(self):
        with pytest.raises(ValueError):
            _email_notification(payload=object())

    def test_raises_created_event(self):
        notification = _email_notification()
        assert len(notification._events) == 1
        event = notification._events[0]
        assert isinstance(event, NotificationCreated)
        assert event.notification_id == notification.id
        assert event.target == "foo@bar.com"


class TestNotificationTransitions:
    def test_mark_sent(self):
        notification = _email_notification()
        notification.mark_sent()
        assert notification.status == NotificationStatus.SENT.value
        assert notification.sent_at is not None
        assert isinstance(notification._events[-1], NotificationSent)

    def test_mark_failed(self):
        notification = _email_notification()
        notification.mark_failed("smtp timeout")
        assert notification.status == NotificationStatus.FAILED.value
        assert notification.failure_reason == "smtp timeout"
        assert isinstance(notification._events[-1], NotificationFailed)

    def test_sent_is_terminal(self):
        notification = _email_notification()
        notification.mark_sent()
        with pytest.raises(ValidationError):
            notification.mark_failed("late failure")

    def test_failed_is_terminal(self):
        notification = _email_notification()
        notification.mark_failed("bounced")
        with pytest.raises(ValidationError):
            notification.mark_sent()
