"""Trigger base class.

A Triggers object is built fresh for every dispatched event and bound to
that event and the entity it refers to. Subclasses declare which trigger
names they answer to; ``fire`` evaluates one of them and returns the data
renderers need, or None when the trigger's conditions do not hold.
"""

from abc import ABC, abstractmethod
from datetime import UTC, datetime, timedelta

import structlog
from notifier.alertrecord.port import AlertRecordStore
from notifier.config import NotifierSettings, get_settings
from notifier.event.event_log import EventLogEntry
from notifier.subscription.selector import Selector, SelectorType
from notifier.subscription.subscription import TriggerName
from notifier.templates.payloads import TemplateData

logger = structlog.get_logger(__name__)


class Triggers(ABC):
    resource_type: str = ""
    object_name: str = ""
    alert_type: str = ""
    event_types: frozenset[str] = frozenset()
    # Warning windows, in hours. A warning is sent once per window.
    warning_thresholds: tuple[int, ...] = ()

    def __init__(
        self,
        event: EventLogEntry,
        entity,
        settings: NotifierSettings | None = None,
        now: datetime | None = None,
    ):
        self.event = event
        self.entity = entity
        self.settings = settings or get_settings()
        self.now = now or datetime.now(UTC)
        self.triggers = {
            TriggerName.EXPIRATION.value: self.expiration,
        }

    @classmethod
    def make(cls, event: EventLogEntry, entity) -> "Triggers":
        return cls(event, entity)

    # -------------------------------------------------------------------
    # Selectors
    # -------------------------------------------------------------------
    def owner(self) -> str | None:
        return None

    def selectors(self) -> frozenset[Selector]:
        selectors = {
            Selector.of(SelectorType.ID, self.entity.id),
            Selector.of(SelectorType.OBJECT, self.object_name),
        }
        owner = self.owner()
        if owner:
            selectors.add(Selector.of(SelectorType.OWNER, owner))
        return frozenset(selectors)

    def headers(self) -> dict[str, str]:
        return {f"X-Evergreen-{s.type}": s.data for s in sorted(self.selectors(), key=lambda s: s.type)}

    # -------------------------------------------------------------------
    # Firing
    # -------------------------------------------------------------------
    def fire(self, trigger_name: str) -> TemplateData | None:
        handler = self.triggers.get(trigger_name)
        if handler is None:
            return None
        return handler()

    @abstractmethod
    def expiration(self) -> TemplateData | None:
        """Data for an expiration warning, or None outside every warning window."""

    def warning_window(self, expires_at: datetime | None) -> int | None:
        """Smallest warning threshold (hours) that covers the time left, if any."""
        if expires_at is None:
            return None
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)

        remaining = expires_at - self.now
        if remaining <= timedelta(0):
            return None

        for threshold in sorted(self.warning_thresholds):
            if remaining <= timedelta(hours=threshold):
                return threshold
        return None

    def claim(self, data: TemplateData, store: AlertRecordStore) -> bool:
        """Record that the alert for ``data`` was sent.

        Returns True when this dispatch owns the alert, False when a record
        already existed and the notifications must be dropped.
        """
        if data.alert_key is None:
            return True
        return not store.exists_or_create(data.alert_key)
