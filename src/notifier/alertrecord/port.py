"""Alert record store port.

The store is the one shared mutable resource of the dispatch pipeline, so it
exposes a single atomic check-and-set instead of separate read and write
calls.
"""

from abc import ABC, abstractmethod

from notifier.alertrecord.record import AlertKey


class AlertRecordStore(ABC):
    @abstractmethod
    def exists_or_create(self, key: AlertKey) -> bool:
        """Insert a record for ``key`` unless one exists.

        Returns:
            True if a record already existed (suppress), False if this call created it.
        """
        ...
