"""Host aggregate: read-side copy of a spawn or task host."""

from datetime import UTC, datetime

from notifier.domain import notifier
from protean.fields import DateTime, String


@notifier.aggregate
class Host:
    """A provisioned host. ``id`` is the host id used in events."""

    host: String(max_length=255)  # DNS name
    distro: String(max_length=100)
    display_name: String(max_length=255)
    started_by: String(max_length=100)
    expiration_time: DateTime()
    created_at: DateTime()

    @classmethod
    def create(cls, host_id, host=None, distro=None, started_by=None, expiration_time=None, display_name=None):
        return cls(
            id=host_id,
            host=host,
            distro=distro,
            display_name=display_name,
            started_by=started_by,
            expiration_time=expiration_time,
            created_at=datetime.now(UTC),
        )
