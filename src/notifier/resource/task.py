"""Task aggregate: a single execution of a task along with its test results."""

import json

from notifier.domain import notifier
from protean.fields import Integer, String, Text


@notifier.aggregate
class Task:
    display_name: String(required=True, max_length=255)
    build_variant: String(required=True, max_length=255)
    project: String(required=True, max_length=255)
    execution: Integer(default=0)
    host_id: String(max_length=255)
    test_results: Text()  # JSON list of {test_file, url, status}

    @classmethod
    def create(cls, task_id, display_name, build_variant, project, host_id=None, execution=0, test_results=None):
        return cls(
            id=task_id,
            display_name=display_name,
            build_variant=build_variant,
            project=project,
            execution=execution,
            host_id=host_id,
            test_results=json.dumps(list(test_results or [])),
        )

    def get_test_results(self) -> list[dict]:
        return json.loads(self.test_results) if self.test_results else []
