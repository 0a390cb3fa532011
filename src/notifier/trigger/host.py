"""Host triggers: expiration warnings for spawn hosts."""

from notifier.alertrecord.record import AlertKey, AlertType
from notifier.event.event_log import EventType, ResourceType
from notifier.templates.payloads import TemplateData
from notifier.trigger.base import Triggers


def host_url(ui_root: str, host_id: str) -> str:
    return f"{ui_root}/host/{host_id}"


class HostTriggers(Triggers):
    resource_type = ResourceType.HOST.value
    object_name = "host"
    alert_type = AlertType.HOST_EXPIRATION
    event_types = frozenset({EventType.HOST_EXPIRATION_WARNING_SENT.value})
    warning_thresholds = (2, 12)

    def owner(self):
        return self.entity.started_by

    def expiration(self):
        if self.event.event_type not in self.event_types:
            return None

        window = self.warning_window(self.entity.expiration_time)
        if window is None:
            return None

        host = self.entity
        return TemplateData(
            template=self.alert_type,
            fields={
                "id": host.id,
                "name": host.display_name or host.host or host.id,
                "distro": host.distro or "unknown",
                "expiration_time": host.expiration_time,
                "url": host_url(self.settings.ui_root, host.id),
            },
            headers=self.headers(),
            alert_key=AlertKey(host.id, self.alert_type, str(window)),
        )
