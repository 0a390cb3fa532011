"""Slack renderer: message body plus a single attachment linking to the resource."""

from notifier.templates.environment import render_template
from notifier.templates.payloads import SlackPayload, TemplateData

ATTACHMENT_COLOR = "#b30c0c"


def render(data: TemplateData, templates: dict, target: str) -> SlackPayload:
    body = render_template(f"{data.template}/slack", templates["slack"], **data.fields)
    title = render_template(f"{data.template}/link_title", templates["link_title"], **data.fields)
    return SlackPayload(
        body=body,
        attachments=[
            {
                "title": title,
                "title_link": data.fields["url"],
                "color": ATTACHMENT_COLOR,
                "fallback": body,
            }
        ],
    )
