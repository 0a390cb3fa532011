"""Alert record store backed by the notifier domain's AlertRecord repository.

Repositories only offer separate get and add calls, so the conditional
insert runs under a process-wide lock.
"""

import threading

import structlog
from notifier.alertrecord.port import AlertRecordStore
from notifier.alertrecord.record import AlertKey, AlertRecord
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

logger = structlog.get_logger(__name__)

_insert_lock = threading.Lock()


class RepositoryAlertRecordStore(AlertRecordStore):
    def exists_or_create(self, key: AlertKey) -> bool:
        repo = current_domain.repository_for(AlertRecord)
        with _insert_lock:
            try:
                repo.get(key.as_id())
                return True
            except ObjectNotFoundError:
                repo.add(AlertRecord.create(key))

        logger.info(
            "Alert recorded",
            resource_id=key.resource_id,
            alert_type=key.alert_type,
            discriminator=key.discriminator,
        )
        return False
