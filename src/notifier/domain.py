"""Notifier bounded context: event triggers and notification dispatch.

Consumes events logged by the CI platform (hosts, volumes, tasks), matches
them against user subscriptions, and renders channel-specific notifications
for Email, Slack, and JIRA. Tracks alert records so that time-based warnings
are sent at most once. Also hosts the build-baron ticket filer.
"""

import logging

import structlog
from protean.domain import Domain

notifier = Domain(name="notifier")

logger = structlog.get_logger(__name__)

logging.getLogger("protean").setLevel(logging.WARNING)
