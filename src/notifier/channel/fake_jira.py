"""Fake JIRA adapter: hands out sequential issue keys per project."""

from collections import defaultdict

from notifier.channel.jira_port import JiraPort, TicketResult


class FakeJiraAdapter(JiraPort):
    def __init__(self):
        self.created: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "JIRA rejected the request"
        self._counters: dict[str, int] = defaultdict(int)

    def configure(self, should_succeed: bool = True, failure_reason: str = "JIRA rejected the request"):
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def create_ticket(self, fields: dict) -> TicketResult:
        if not self.should_succeed:
            return TicketResult(success=False, failure_reason=self.failure_reason)

        project = fields.get("project", {}).get("key", "UNKNOWN")
        self._counters[project] += 1
        key = f"{project}-{self._counters[project]}"
        self.created.append({"key": key, "fields": fields})
        return TicketResult(success=True, key=key, ticket_id=str(len(self.created)))

    def reset(self):
        self.created.clear()
        self._counters.clear()
        self.should_succeed = True
        self.failure_reason = "JIRA rejected the request"
