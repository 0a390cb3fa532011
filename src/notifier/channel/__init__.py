"""Channel adapter registry: one adapter per subscriber type.

Uses fake adapters by default; real SMTP, Slack, and JIRA clients live with
the delivery service and are installed through set_channel().
"""

from notifier.subscription.subscription import SubscriberType

_channel_instances: dict[str, object] = {}


def get_channel(subscriber_type: str):
    """Return the configured channel adapter (singleton per subscriber type)."""
    if subscriber_type not in _channel_instances:
        if subscriber_type == SubscriberType.EMAIL.value:
            from notifier.channel.fake_email import FakeEmailAdapter

            _channel_instances[subscriber_type] = FakeEmailAdapter()
        elif subscriber_type == SubscriberType.SLACK.value:
            from notifier.channel.fake_slack import FakeSlackAdapter

            _channel_instances[subscriber_type] = FakeSlackAdapter()
        elif subscriber_type == SubscriberType.JIRA_ISSUE.value:
            from notifier.channel.fake_jira import FakeJiraAdapter

            _channel_instances[subscriber_type] = FakeJiraAdapter()
        else:
            raise ValueError(f"Unknown subscriber type: {subscriber_type}")

    return _channel_instances[subscriber_type]


def set_channel(subscriber_type: str, adapter) -> None:
    _channel_instances[subscriber_type] = adapter


def reset_channels():
    """Reset all channel singletons (useful for testing)."""
    _channel_instances.clear()
