"""In-memory alert record store for development and testing."""

import threading
from datetime import UTC, datetime

from notifier.alertrecord.port import AlertRecordStore
from notifier.alertrecord.record import AlertKey


class InMemoryAlertRecordStore(AlertRecordStore):
    """Keeps records in a dict guarded by a lock."""

    def __init__(self):
        self._records: dict[str, datetime] = {}
        self._lock = threading.Lock()

    def exists_or_create(self, key: AlertKey) -> bool:
        record_key = key.as_id()
        with self._lock:
            if record_key in self._records:
                return True
            self._records[record_key] = datetime.now(UTC)
            return False

    def clear(self, key: AlertKey | None = None) -> None:
        """Drop one record, or all of them."""
        with self._lock:
            if key is None:
                self._records.clear()
            else:
                self._records.pop(key.as_id(), None)

    def __len__(self):
        return len(self._records)
