"""Subscription source port and its repository-backed adapter."""

from abc import ABC, abstractmethod

from notifier.subscription.subscription import Subscription
from protean.utils.globals import current_domain


class SubscriptionSource(ABC):
    @abstractmethod
    def find_by_resource_type(self, resource_type: str) -> list[Subscription]:
        """Return every subscription scoped to ``resource_type``."""
        ...


class RepositorySubscriptionSource(SubscriptionSource):
    def find_by_resource_type(self, resource_type: str) -> list[Subscription]:
        repo = current_domain.repository_for(Subscription)
        return list(repo._dao.query.filter(resource_type=resource_type).all().items)


_source: SubscriptionSource | None = None


def get_subscription_source() -> SubscriptionSource:
    global _source
    if _source is None:
        _source = RepositorySubscriptionSource()
    return _source


def set_subscription_source(source: SubscriptionSource) -> None:
    global _source
    _source = source


def reset_subscription_source() -> None:
    global _source
    _source = None
