"""Notifier settings: read from the environment once, overridable in tests.

Environment variables:
    NOTIFIER_UI_ROOT                 Base URL of the CI web UI
    NOTIFIER_TICKET_PROJECTS         JSON map of CI project -> JIRA project key
    NOTIFIER_DEFAULT_TICKET_PROJECT  JIRA project used when a CI project has no mapping
    NOTIFIER_FAILING_TASKS_FIELD     JIRA custom field ids for the build-failure ticket
    NOTIFIER_FAILING_VARIANT_FIELD
    NOTIFIER_PROJECT_FIELD
"""

import json
import os
from dataclasses import dataclass, field

DEFAULT_UI_ROOT = "https://evergreen.mongodb.com"


@dataclass(frozen=True)
class NotifierSettings:
    ui_root: str = DEFAULT_UI_ROOT
    ticket_projects: dict[str, str] = field(default_factory=dict)
    default_ticket_project: str = "BF"
    ticket_issue_type: str = "Build Failure"
    failing_tasks_field: str = "customfield_12950"
    failing_variant_field: str = "customfield_14277"
    project_field: str = "customfield_14278"

    @classmethod
    def from_env(cls) -> "NotifierSettings":
        projects = os.environ.get("NOTIFIER_TICKET_PROJECTS")
        return cls(
            ui_root=os.environ.get("NOTIFIER_UI_ROOT", DEFAULT_UI_ROOT).rstrip("/"),
            ticket_projects=json.loads(projects) if projects else {},
            default_ticket_project=os.environ.get("NOTIFIER_DEFAULT_TICKET_PROJECT", "BF"),
            failing_tasks_field=os.environ.get("NOTIFIER_FAILING_TASKS_FIELD", "customfield_12950"),
            failing_variant_field=os.environ.get("NOTIFIER_FAILING_VARIANT_FIELD", "customfield_14277"),
            project_field=os.environ.get("NOTIFIER_PROJECT_FIELD", "customfield_14278"),
        )

    def ticket_project_for(self, project: str) -> str:
        """JIRA project that build-failure tickets for ``project`` are filed under."""
        return self.ticket_projects.get(project, self.default_ticket_project)


_settings: NotifierSettings | None = None


def get_settings() -> NotifierSettings:
    """Return the active settings, loading them from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = NotifierSettings.from_env()
    return _settings


def set_settings(settings: NotifierSettings) -> None:
    """Override the active settings (useful for tests)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Forget the active settings; the next call reloads from the environment."""
    global _settings
    _settings = None
