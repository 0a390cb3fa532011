"""Email renderer: subject, body, and selector-derived headers."""

from notifier.templates.environment import render_template
from notifier.templates.payloads import EmailPayload, TemplateData


def render(data: TemplateData, templates: dict, target: str) -> EmailPayload:
    return EmailPayload(
        subject=render_template(f"{data.template}/subject", templates["subject"], **data.fields),
        body=render_template(f"{data.template}/body", templates["body"], **data.fields),
        headers=dict(data.headers),
    )
