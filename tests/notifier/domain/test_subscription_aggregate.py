"""Tests for the Subscription aggregate."""

import json

import pytest
from notifier.event.event_log import ResourceType
from notifier.subscription.events import SubscriptionCreated
from notifier.subscription.selector import Selector
from notifier.subscription.subscription import SubscriberType, Subscription, TriggerName
from protean import current_domain
from protean.exceptions import ValidationError


def _make_subscription(**overrides):
    defaults = {
        "resource_type": ResourceType.VOLUME,
        "trigger": TriggerName.EXPIRATION,
        "selectors": [Selector("id", "v0"), Selector("owner", "alice")],
        "subscriber_type": SubscriberType.EMAIL,
        "subscriber_target": "alice@example.com",
        "owner": "alice",
    }
    defaults.update(overrides)
    return Subscription.create(**defaults)


class TestSubscriptionCreation:
    def test_create_stores_enum_values(self):
        sub = _make_subscription()
        assert sub.resource_type == "VOLUME"
        assert sub.trigger == "expiration"
        assert sub.subscriber_type == "email"

    def test_create_keeps_selector_order(self):
        sub = _make_subscription()
        assert sub.get_selectors() == [Selector("id", "v0"), Selector("owner", "alice")]

    def test_selectors_stored_as_json(self):
        sub = _make_subscription()
        assert json.loads(sub.selectors) == [
            {"type": "id", "data": "v0"},
            {"type": "owner", "data": "alice"},
        ]

    def test_create_without_selectors_rejected(self):
        with pytest.raises(ValidationError):
            _make_subscription(selectors=[])

    def test_create_raises_subscription_created(self):
        sub = _make_subscription()
        events = [e for e in sub._events if isinstance(e, SubscriptionCreated)]
        assert len(events) == 1
        assert events[0].trigger == "expiration"
        assert events[0].subscriber_type == "email"


class TestSubscriptionById:
    def test_by_id_uses_single_id_selector(self):
        sub = Subscription.by_id(
            ResourceType.HOST,
            TriggerName.EXPIRATION,
            "h1",
            SubscriberType.SLACK,
            "#spawnhosts",
        )
        assert sub.get_selectors() == [Selector("id", "h1")]
        assert sub.resource_type == "HOST"
        assert sub.subscriber_target == "#spawnhosts"


class TestSubscriptionPersistence:
    def test_round_trip_through_repository(self):
        sub = _make_subscription()
        repo = current_domain.repository_for(Subscription)
        repo.add(sub)

        loaded = repo.get(sub.id)
        assert loaded.get_selectors() == sub.get_selectors()
        assert loaded.subscriber_target == "alice@example.com"
