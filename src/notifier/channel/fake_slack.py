"""Fake Slack adapter: records posted messages in memory."""

from uuid import uuid4

from notifier.channel.slack_port import SlackPort


class FakeSlackAdapter(SlackPort):
    def __init__(self):
        self.sent_messages: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Slack delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Slack delivery failed"):
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def send(self, channel, message, attachments=None) -> dict:
        if not self.should_succeed:
            return {"message_id": None, "status": "failed", "error": self.failure_reason}

        message_id = f"slack-{uuid4().hex[:12]}"
        self.sent_messages.append(
            {
                "message_id": message_id,
                "channel": channel,
                "message": message,
                "attachments": list(attachments or []),
            }
        )
        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        self.sent_messages.clear()
        self.should_succeed = True
        self.failure_reason = "Slack delivery failed"
