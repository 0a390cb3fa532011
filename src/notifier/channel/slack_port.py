"""Slack channel port: abstract interface for Slack delivery."""

from abc import ABC, abstractmethod


class SlackPort(ABC):
    @abstractmethod
    def send(
        self,
        channel: str,
        message: str,
        attachments: list[dict] | None = None,
    ) -> dict:
        """Post a message to a channel ("#builds") or user ("@alice").

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
