"""Event dispatch: turns one logged event into delivered notifications.

The sequence is synchronous: resolve the trigger factory, load the entity,
match subscriptions, fire each trigger name once, render one notification
per matching subscription, claim the alert record, hand off to delivery.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum

import structlog
from notifier.alertrecord import get_alert_store
from notifier.alertrecord.port import AlertRecordStore
from notifier.errors import InvalidSubscription, NotFound, TemplateError, UnsupportedResourceType
from notifier.event.event_log import EventLogEntry
from notifier.notification.assembler import assemble
from notifier.notification.delivery import DeliverySink, get_delivery_sink
from notifier.notification.notification import Notification
from notifier.resource.loader import EntityLoader, get_entity_loader
from notifier.subscription.selector import matches
from notifier.subscription.source import SubscriptionSource, get_subscription_source
from notifier.trigger.registry import DEFAULT_REGISTRY, EventHandlerRegistry

logger = structlog.get_logger(__name__)


class DispatchStatus(Enum):
    PROCESSED = "processed"
    UNPROCESSABLE = "unprocessable"


@dataclass(frozen=True)
class DispatchOutcome:
    event_id: str
    status: str
    notifications: list[Notification] = field(default_factory=list)
    error: str | None = None

    @property
    def processed(self) -> bool:
        return self.status == DispatchStatus.PROCESSED.value


def notifications_from_event(
    event: EventLogEntry,
    registry: EventHandlerRegistry | None = None,
    loader: EntityLoader | None = None,
    subscriptions: SubscriptionSource | None = None,
    alert_store: AlertRecordStore | None = None,
) -> list[Notification]:
    """Build the notifications an event produces.

    Raises:
        UnsupportedResourceType: no trigger handles the event's resource type.
        NotFound: the entity the event refers to is gone.
        TemplateError: rendering failed; no alert record is written.
    """
    registry = registry or DEFAULT_REGISTRY
    loader = loader or get_entity_loader()
    subscriptions = subscriptions or get_subscription_source()
    alert_store = alert_store or get_alert_store()

    factory = registry.resolve(event.resource_type, event.event_type)
    trigger = factory(event, loader.load_entity(event))
    event_selectors = trigger.selectors()

    matched = defaultdict(list)
    for subscription in subscriptions.find_by_resource_type(event.resource_type):
        if subscription.trigger not in trigger.triggers:
            continue
        try:
            if not matches(subscription.get_selectors(), event_selectors):
                continue
        except InvalidSubscription as e:
            logger.error(
                "Skipping misconfigured subscription",
                subscription_id=str(subscription.id),
                event_id=event.id,
                error=str(e),
            )
            continue
        matched[subscription.trigger].append(subscription)

    notifications = []
    for trigger_name, subs in matched.items():
        data = trigger.fire(trigger_name)
        if data is None:
            continue

        try:
            batch = [n for sub in subs for n in assemble(sub, event, data)]
        except TemplateError:
            logger.error(
                "Failed to render notification",
                event_id=event.id,
                resource_id=event.resource_id,
                trigger=trigger_name,
                template=data.template,
                exc_info=True,
            )
            raise

        if not batch:
            continue

        if not trigger.claim(data, alert_store):
            logger.info(
                "Alert already sent, suppressing notifications",
                event_id=event.id,
                resource_id=event.resource_id,
                trigger=trigger_name,
            )
            continue

        notifications.extend(batch)

    return notifications


def process_event(
    event: EventLogEntry,
    sink: DeliverySink | None = None,
    **collaborators,
) -> DispatchOutcome:
    """Dispatch one event and deliver what it produces.

    Unsupported resource types and vanished entities mark the event
    unprocessable. Template errors are bugs and propagate.
    """
    log = logger.bind(event_id=event.id, resource_type=event.resource_type, resource_id=event.resource_id)

    try:
        notifications = notifications_from_event(event, **collaborators)
    except UnsupportedResourceType as e:
        log.warning("Skipping event with unsupported resource type", event_type=event.event_type)
        return DispatchOutcome(event_id=event.id, status=DispatchStatus.UNPROCESSABLE.value, error=str(e))
    except NotFound as e:
        log.warning("Skipping event whose entity no longer exists", error=str(e))
        return DispatchOutcome(event_id=event.id, status=DispatchStatus.UNPROCESSABLE.value, error=str(e))

    if notifications:
        (sink or get_delivery_sink()).deliver(notifications)

    log.info("Event processed", notification_count=len(notifications))
    return DispatchOutcome(event_id=event.id, status=DispatchStatus.PROCESSED.value, notifications=notifications)
