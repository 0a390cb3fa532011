"""Template data handed from triggers to renderers, and the rendered payloads."""

from dataclasses import dataclass, field
from typing import Any

from notifier.alertrecord.record import AlertKey


@dataclass(frozen=True)
class TemplateData:
    """Everything a renderer needs for one fired trigger.

    ``template`` names the fixed template set (e.g. "volume-expiration");
    ``fields`` holds the named values those templates reference.
    """

    template: str
    fields: dict[str, Any]
    headers: dict[str, str] = field(default_factory=dict)
    alert_key: AlertKey | None = None


@dataclass(frozen=True)
class EmailPayload:
    subject: str
    body: str
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SlackPayload:
    body: str
    attachments: list[dict] = field(default_factory=list)


@dataclass(frozen=True)
class JiraIssuePayload:
    project: str
    issue_type: str
    summary: str
    description: str
