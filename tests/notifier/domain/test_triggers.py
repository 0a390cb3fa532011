"""Tests for the Volume and Host triggers."""

from datetime import UTC, datetime, timedelta

import pytest
from notifier.alertrecord.memory_store import InMemoryAlertRecordStore
from notifier.alertrecord.record import AlertKey, AlertType
from notifier.config import NotifierSettings
from notifier.event.event_log import EventLogEntry, EventType, ResourceType
from notifier.resource.host import Host
from notifier.resource.volume import Volume
from notifier.subscription.selector import Selector
from notifier.trigger.host import HostTriggers
from notifier.trigger.volume import VolumeTriggers

NOW = datetime(2026, 3, 2, 12, 0, tzinfo=UTC)
SETTINGS = NotifierSettings(ui_root="https://ci.example.com")


def _volume_triggers(expires_in=timedelta(hours=12), event_type=EventType.VOLUME_EXPIRATION_WARNING_SENT, **kwargs):
    volume = Volume.create("v0", expiration=NOW + expires_in, **kwargs)
    event = EventLogEntry.log(ResourceType.HOST, "v0", event_type, event_id="e0")
    return VolumeTriggers(event, volume, settings=SETTINGS, now=NOW)


def _host_triggers(expires_in=timedelta(hours=1), **kwargs):
    host = Host.create("h1", host="h1.ci.example.com", distro="ubuntu2204", expiration_time=NOW + expires_in, **kwargs)
    event = EventLogEntry.log(ResourceType.HOST, "h1", EventType.HOST_EXPIRATION_WARNING_SENT, event_id="e1")
    return HostTriggers(event, host, settings=SETTINGS, now=NOW)


class TestVolumeSelectors:
    def test_id_and_object(self):
        assert _volume_triggers().selectors() == frozenset({Selector("id", "v0"), Selector("object", "volume")})

    def test_owner_added_when_known(self):
        assert Selector("owner", "alice") in _volume_triggers(created_by="alice").selectors()

    def test_selectors_are_deterministic(self):
        triggers = _volume_triggers(created_by="alice")
        assert triggers.selectors() == triggers.selectors()

    def test_headers_derived_from_selectors(self):
        headers = _volume_triggers(created_by="alice").headers()
        assert headers == {
            "X-Evergreen-id": "v0",
            "X-Evergreen-object": "volume",
            "X-Evergreen-owner": "alice",
        }


class TestVolumeExpiration:
    def test_fires_inside_warning_window(self):
        data = _volume_triggers().fire("expiration")
        assert data is not None
        assert data.template == AlertType.VOLUME_EXPIRATION
        assert data.fields["id"] == "v0"
        assert data.fields["url"] == "https://ci.example.com/spawn#?resourcetype=volumes&id=v0"
        assert data.alert_key == AlertKey("v0", AlertType.VOLUME_EXPIRATION, "24")

    def test_longer_window_uses_larger_threshold(self):
        data = _volume_triggers(expires_in=timedelta(days=10)).fire("expiration")
        assert data.alert_key.discriminator == str(21 * 24)

    def test_no_op_outside_warning_window(self):
        assert _volume_triggers(expires_in=timedelta(days=30)).fire("expiration") is None

    def test_no_op_when_already_expired(self):
        assert _volume_triggers(expires_in=timedelta(hours=-1)).fire("expiration") is None

    def test_no_op_for_other_event_types(self):
        assert _volume_triggers(event_type=EventType.HOST_PROVISIONED).fire("expiration") is None

    def test_unknown_trigger_name_is_no_op(self):
        assert _volume_triggers().fire("outcome") is None

    def test_display_name_falls_back_to_id(self):
        assert _volume_triggers().fire("expiration").fields["name"] == "v0"


class TestHostExpiration:
    def test_fires_with_host_fields(self):
        data = _host_triggers().fire("expiration")
        assert data.fields["distro"] == "ubuntu2204"
        assert data.fields["url"] == "https://ci.example.com/host/h1"
        assert data.alert_key == AlertKey("h1", AlertType.HOST_EXPIRATION, "2")

    def test_twelve_hour_window(self):
        data = _host_triggers(expires_in=timedelta(hours=6)).fire("expiration")
        assert data.alert_key.discriminator == "12"

    def test_no_op_beyond_twelve_hours(self):
        assert _host_triggers(expires_in=timedelta(hours=13)).fire("expiration") is None

    def test_owner_selector_from_started_by(self):
        assert Selector("owner", "bob") in _host_triggers(started_by="bob").selectors()


class TestClaim:
    def test_first_claim_wins(self):
        triggers = _volume_triggers()
        data = triggers.fire("expiration")
        store = InMemoryAlertRecordStore()
        assert triggers.claim(data, store) is True
        assert triggers.claim(data, store) is False


class TestTriggersBase:
    def test_base_class_is_abstract(self):
        from notifier.trigger.base import Triggers

        event = EventLogEntry.log(ResourceType.HOST, "h1", EventType.HOST_EXPIRATION_WARNING_SENT)
        with pytest.raises(TypeError):
            Triggers(event, Host.create("h1"))
