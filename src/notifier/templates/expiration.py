"""Expiration warning templates for hosts and volumes.

Each template set provides an email subject, a plain-text body (email and
JIRA), and a Slack body using Slack link markup.
"""

from notifier.alertrecord.record import AlertType
from notifier.templates.environment import compile_template

EXPIRING_HOST_SUBJECT = "{{ distro }} host termination reminder"
EXPIRING_HOST_BODY = (
    "Your {{ distro }} host with id {{ id }} will be terminated at {{ expiration_time|human_time }}. "
    "Visit the spawnhost page ({{ url }}) to extend its lifetime."
)
EXPIRING_HOST_SLACK_BODY = (
    "Your {{ distro }} host with id {{ id }} will be terminated at {{ expiration_time|human_time }}. "
    "Visit the <{{ url }}|spawnhost page> to extend its lifetime."
)

EXPIRING_VOLUME_SUBJECT = "Volume {{ name }} termination reminder"
EXPIRING_VOLUME_BODY = (
    "Your volume with id {{ id }} will be terminated at {{ expiration_time|human_time }}. "
    "Visit the volume page ({{ url }}) to extend its lifetime."
)
EXPIRING_VOLUME_SLACK_BODY = (
    "Your volume with id {{ id }} will be terminated at {{ expiration_time|human_time }}. "
    "Visit the <{{ url }}|volume page> to extend its lifetime."
)

TEMPLATES = {
    AlertType.HOST_EXPIRATION: {
        "subject": compile_template(EXPIRING_HOST_SUBJECT),
        "body": compile_template(EXPIRING_HOST_BODY),
        "slack": compile_template(EXPIRING_HOST_SLACK_BODY),
        "link_title": compile_template("Spawn host {{ name }}"),
    },
    AlertType.VOLUME_EXPIRATION: {
        "subject": compile_template(EXPIRING_VOLUME_SUBJECT),
        "body": compile_template(EXPIRING_VOLUME_BODY),
        "slack": compile_template(EXPIRING_VOLUME_SLACK_BODY),
        "link_title": compile_template("Volume {{ name }}"),
    },
}
