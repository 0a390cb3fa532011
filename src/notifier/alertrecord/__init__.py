"""Alert record store factory.

Provides get_alert_store() / set_alert_store() to swap implementations:
- RepositoryAlertRecordStore (default) persists AlertRecord aggregates
- InMemoryAlertRecordStore for isolated tests
"""

from notifier.alertrecord.port import AlertRecordStore
from notifier.alertrecord.repository_store import RepositoryAlertRecordStore

_current_store: AlertRecordStore | None = None


def get_alert_store() -> AlertRecordStore:
    """Return the current alert record store. Defaults to the repository-backed store."""
    global _current_store
    if _current_store is None:
        _current_store = RepositoryAlertRecordStore()
    return _current_store


def set_alert_store(store: AlertRecordStore) -> None:
    """Override the active store (useful for tests)."""
    global _current_store
    _current_store = store


def reset_alert_store() -> None:
    """Reset to default store."""
    global _current_store
    _current_store = None
