"""Shared BDD steps for notification dispatch."""

from datetime import UTC, datetime, timedelta

from notifier.event.event_log import ResourceType
from notifier.resource.volume import Volume
from notifier.subscription.subscription import Subscription, SubscriberType, TriggerName
from protean import current_domain
from pytest_bdd import given, parsers



@given(parsers.cfparse('a volume "{volume_id}" that expires in {hours:d} hours'))
def volume_expiring(volume_id, hours):
    volume = Volume.create(volume_id, expiration=datetime.now(UTC) + timedelta(hours=hours))
    current_domain.repository_for(Volume).add(volume)


@given(parsers.cfparse('an email subscription to volume "{volume_id}" for "{target}"'))
def email_subscription(volume_id, target):
    subscription = Subscription.by_id(
        ResourceType.HOST,
        TriggerName.EXPIRATION,
        volume_id,
        SubscriberType.EMAIL,
        target,
    )
    current_domain.repository_for(Subscription).add(subscription)
