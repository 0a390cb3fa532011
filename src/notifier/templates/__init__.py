"""Renderer registry: maps subscriber types to payload renderers.

Each renderer turns a trigger's TemplateData into the payload shape its
channel expects. Template sets are looked up by the TemplateData's
``template`` name.
"""

from notifier.errors import TemplateError
from notifier.subscription.subscription import SubscriberType
from notifier.templates import email, jira_issue, slack
from notifier.templates.expiration import TEMPLATES as EXPIRATION_TEMPLATES
from notifier.templates.payloads import TemplateData

TEMPLATE_SETS: dict[str, dict] = {
    **EXPIRATION_TEMPLATES,
}

RENDERER_REGISTRY = {
    SubscriberType.EMAIL.value: email.render,
    SubscriberType.SLACK.value: slack.render,
    SubscriberType.JIRA_ISSUE.value: jira_issue.render,
}


def get_renderer(subscriber_type: str):
    """Look up the renderer for a subscriber type."""
    renderer = RENDERER_REGISTRY.get(subscriber_type)
    if renderer is None:
        raise ValueError(f"No renderer registered for subscriber type: {subscriber_type}")
    return renderer


def get_template_set(name: str) -> dict:
    templates = TEMPLATE_SETS.get(name)
    if templates is None:
        raise TemplateError(name, "no template set registered")
    return templates


def render(subscriber_type: str, data: TemplateData, target: str = ""):
    """Render ``data`` into the payload for ``subscriber_type``."""
    renderer = get_renderer(subscriber_type)
    return renderer(data, get_template_set(data.template), target)
