"""Volume triggers: expiration warnings for spawn volumes."""

from notifier.alertrecord.record import AlertKey, AlertType
from notifier.event.event_log import EventType, ResourceType
from notifier.templates.payloads import TemplateData
from notifier.trigger.base import Triggers


def volume_url(ui_root: str, volume_id: str) -> str:
    return f"{ui_root}/spawn#?resourcetype=volumes&id={volume_id}"


class VolumeTriggers(Triggers):
    resource_type = ResourceType.VOLUME.value
    object_name = "volume"
    alert_type = AlertType.VOLUME_EXPIRATION
    event_types = frozenset({EventType.VOLUME_EXPIRATION_WARNING_SENT.value})
    warning_thresholds = (24, 21 * 24)

    def owner(self):
        return self.entity.created_by

    def expiration(self):
        if self.event.event_type not in self.event_types:
            return None

        window = self.warning_window(self.entity.expiration)
        if window is None:
            return None

        volume = self.entity
        return TemplateData(
            template=self.alert_type,
            fields={
                "id": volume.id,
                "name": volume.display_name or volume.id,
                "expiration_time": volume.expiration,
                "url": volume_url(self.settings.ui_root, volume.id),
            },
            headers=self.headers(),
            alert_key=AlertKey(volume.id, self.alert_type, str(window)),
        )
