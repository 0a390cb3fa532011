"""Volume aggregate: read-side copy of a user's spawn volume."""

from datetime import UTC, datetime

from notifier.domain import notifier
from protean.fields import DateTime, Integer, String


@notifier.aggregate
class Volume:
    display_name: String(max_length=255)
    created_by: String(max_length=100)
    size_gb: Integer(default=0)
    expiration: DateTime()
    created_at: DateTime()

    @classmethod
    def create(cls, volume_id, expiration=None, created_by=None, display_name=None, size_gb=0):
        return cls(
            id=volume_id,
            display_name=display_name,
            created_by=created_by,
            size_gb=size_gb,
            expiration=expiration,
            created_at=datetime.now(UTC),
        )
