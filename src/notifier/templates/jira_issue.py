"""JIRA issue renderer: the subscriber target is the JIRA project key."""

from notifier.templates.environment import render_template
from notifier.templates.payloads import JiraIssuePayload, TemplateData

DEFAULT_ISSUE_TYPE = "Build Failure"


def render(data: TemplateData, templates: dict, target: str) -> JiraIssuePayload:
    return JiraIssuePayload(
        project=target,
        issue_type=DEFAULT_ISSUE_TYPE,
        summary=render_template(f"{data.template}/subject", templates["subject"], **data.fields),
        description=render_template(f"{data.template}/body", templates["body"], **data.fields),
    )
