"""Build-baron ticket filer: files a JIRA "Build Failure" ticket for a task.

The requesting user picks a task and some of its failing tests; the filer
builds the summary, custom fields, and a wiki-markup description linking to
the task, host, project, and each test's logs and history.
"""

from dataclasses import dataclass, field

import structlog
from notifier.channel import get_channel
from notifier.channel.jira_port import JiraPort, TicketResult
from notifier.config import NotifierSettings, get_settings
from notifier.errors import HostNotFound, LookupFailed, TaskNotFound, UpstreamServiceError
from notifier.resource.host import Host
from notifier.resource.task import Task
from notifier.subscription.subscription import SubscriberType
from notifier.templates.environment import compile_template, render_template
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

logger = structlog.get_logger(__name__)

MAX_NAMED_TESTS = 4

DESCRIPTION_TEMPLATE = compile_template(
    """
h2. [{{ task.display_name }} failed on {{ task.build_variant }}|{{ ui_root }}/task/{{ task.id }}/{{ task.execution }}]

Host: [{{ host.host }}|{{ ui_root }}/host/{{ host.id }}]
Project: [{{ task.project }}|{{ ui_root }}/waterfall/{{ task.project }}]

{% for test in tests %}*{{ test.name }}* - [Logs|{{ test.url }}] | [History|{{ test.history_url }}]

{% endfor %}

~BF Ticket Generated by [~{{ user_id }}]~
"""
)


@dataclass(frozen=True)
class FailingTest:
    name: str
    url: str
    history_url: str


@dataclass(frozen=True)
class TicketRequest:
    project: str
    summary: str
    description: str
    issue_type: str
    assignee: str
    reporter: str
    custom_fields: dict[str, list[str]] = field(default_factory=dict)

    def as_fields(self) -> dict:
        """The JIRA create-issue ``fields`` document."""
        fields = {
            "project": {"key": self.project},
            "summary": self.summary,
            "issuetype": {"name": self.issue_type},
            "assignee": {"name": self.assignee},
            "reporter": {"name": self.reporter},
            "description": self.description,
        }
        fields.update(self.custom_fields)
        return fields


def clean_test_name(path: str) -> str:
    """Short name of a test file: ``a/b/c.js`` → ``c.js``, ``a/b/`` → ``b``.

    Unix separators win over Windows ones; trailing separators are dropped
    before taking the last segment.
    """
    while True:
        for separator in ("/", "\\"):
            index = path.rfind(separator)
            if index != -1:
                break
        else:
            return path

        if index == len(path) - 1:
            path = path[:-1]
            continue
        return path[index + 1 :]


def history_url(ui_root: str, task: Task, test_name: str) -> str:
    return f"{ui_root}/task_history/{task.project}/{task.display_name}#{test_name}=fail"


def get_summary(task_name: str, tests: list[FailingTest]) -> str:
    if not tests:
        # likely a compile failure
        return f"{task_name} failure"
    if len(tests) > MAX_NAMED_TESTS:
        return f"{task_name} failures"
    return ", ".join(test.name for test in tests)


def render_description(task: Task, host: Host, user_id: str, tests: list[FailingTest], ui_root: str) -> str:
    return render_template(
        "buildbaron/description",
        DESCRIPTION_TEMPLATE,
        task=task,
        host=host,
        user_id=user_id,
        tests=tests,
        ui_root=ui_root,
    )


def selected_failures(task: Task, test_ids: list[str], ui_root: str) -> list[FailingTest]:
    """Test results of ``task`` whose test file is among ``test_ids``, in task order."""
    wanted = set(test_ids)
    failures = []
    for result in task.get_test_results():
        test_file = result.get("test_file", "")
        if test_file not in wanted:
            continue
        name = clean_test_name(test_file)
        failures.append(
            FailingTest(
                name=name,
                url=result.get("url", ""),
                history_url=history_url(ui_root, task, name),
            )
        )
    return failures


def build_ticket_request(
    task: Task,
    host: Host,
    user_id: str,
    test_ids: list[str],
    settings: NotifierSettings | None = None,
) -> TicketRequest:
    settings = settings or get_settings()
    tests = selected_failures(task, test_ids, settings.ui_root)

    return TicketRequest(
        project=settings.ticket_project_for(task.project),
        summary=get_summary(task.display_name, tests),
        description=render_description(task, host, user_id, tests, settings.ui_root),
        issue_type=settings.ticket_issue_type,
        assignee=user_id,
        reporter=user_id,
        custom_fields={
            settings.failing_tasks_field: [task.display_name],
            settings.failing_variant_field: [task.build_variant],
            settings.project_field: [task.project],
        },
    )


def _load(aggregate_cls, identifier):
    try:
        return current_domain.repository_for(aggregate_cls).get(identifier)
    except ObjectNotFoundError:
        return None
    except Exception as e:
        raise LookupFailed(f"loading {aggregate_cls.__name__} '{identifier}': {e}") from e


def file_ticket(task_id: str, test_ids: list[str], user_id: str, tracker: JiraPort | None = None) -> TicketResult:
    """File a build-failure ticket for ``task_id`` on behalf of ``user_id``.

    Raises:
        TaskNotFound / HostNotFound: the task or the host it ran on is gone.
        LookupFailed: the store failed while loading either.
        TemplateError: the description could not be rendered.
        UpstreamServiceError: JIRA did not create the ticket.
    """
    task = _load(Task, task_id)
    if task is None:
        raise TaskNotFound(task_id)

    host = _load(Host, task.host_id) if task.host_id else None
    if host is None:
        raise HostNotFound(task_id, task.host_id)

    request = build_ticket_request(task, host, user_id, test_ids)

    if tracker is None:
        tracker = get_channel(SubscriberType.JIRA_ISSUE.value)

    logger.info("Creating JIRA ticket", user_id=user_id, task_id=task_id, project=request.project)
    result = tracker.create_ticket(request.as_fields())
    if not result.success:
        logger.error("Error creating JIRA ticket", task_id=task_id, error=result.failure_reason)
        raise UpstreamServiceError("jira", result.failure_reason or "ticket was not created")

    logger.info("Ticket successfully created", key=result.key, task_id=task_id)
    return result
