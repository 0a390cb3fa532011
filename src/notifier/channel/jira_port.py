"""JIRA port: abstract interface for creating issues in the ticket tracker."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class TicketResult:
    """Result of a create-issue request."""

    success: bool
    key: str | None = None
    ticket_id: str | None = None
    failure_reason: str | None = None


class JiraPort(ABC):
    @abstractmethod
    def create_ticket(self, fields: dict) -> TicketResult:
        """Create an issue from a JIRA ``fields`` document."""
        ...
