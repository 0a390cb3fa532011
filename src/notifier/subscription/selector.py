"""Selectors and the selector matcher.

A subscription's selectors are ANDed: every one of them must be present in
the selector set derived from the event's subject.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from notifier.errors import InvalidSubscription


class SelectorType(Enum):
    ID = "id"
    OBJECT = "object"
    OWNER = "owner"
    PROJECT = "project"


@dataclass(frozen=True)
class Selector:
    type: str
    data: str

    @classmethod
    def of(cls, selector_type, data):
        if isinstance(selector_type, SelectorType):
            selector_type = selector_type.value
        return cls(type=selector_type, data=str(data))

    def to_dict(self) -> dict:
        return {"type": self.type, "data": self.data}


def matches(subscription_selectors: Iterable[Selector], event_selectors: Iterable[Selector]) -> bool:
    """Return True iff every subscription selector appears among the event selectors.

    Comparison is exact and case-sensitive. A subscription without selectors
    is misconfigured, not a wildcard, and raises ``InvalidSubscription``.
    """
    wanted = list(subscription_selectors)
    if not wanted:
        raise InvalidSubscription("Subscription has no selectors")

    available = list(event_selectors)
    for selector in wanted:
        if not any(selector.type == candidate.type and selector.data == candidate.data for candidate in available):
            return False
    return True
