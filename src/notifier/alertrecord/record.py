"""AlertRecord aggregate: dedup marker for alerts that were already sent.

A record's presence for a key means "already alerted, suppress". Records are
created once and never updated; clearing them is an administrative action
outside the notifier.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from notifier.alertrecord.events import AlertRecorded
from notifier.domain import notifier
from protean.fields import DateTime, Identifier, String


class AlertType:
    HOST_EXPIRATION = "host-expiration"
    VOLUME_EXPIRATION = "volume-expiration"


@dataclass(frozen=True)
class AlertKey:
    resource_id: str
    alert_type: str
    discriminator: str | None = None

    def as_id(self) -> str:
        parts = [self.resource_id, self.alert_type]
        if self.discriminator is not None:
            parts.append(self.discriminator)
        return "|".join(parts)


@notifier.aggregate
class AlertRecord:
    record_key: Identifier(identifier=True, required=True)
    resource_id: String(required=True, max_length=255)
    alert_type: String(required=True, max_length=100)
    discriminator: String(max_length=100)
    created_at: DateTime()

    @classmethod
    def create(cls, key: AlertKey):
        now = datetime.now(UTC)
        record = cls(
            record_key=key.as_id(),
            resource_id=key.resource_id,
            alert_type=key.alert_type,
            discriminator=key.discriminator,
            created_at=now,
        )

        record.raise_(
            AlertRecorded(
                record_key=record.record_key,
                resource_id=key.resource_id,
                alert_type=key.alert_type,
                discriminator=key.discriminator,
                recorded_at=now,
            )
        )

        return record
