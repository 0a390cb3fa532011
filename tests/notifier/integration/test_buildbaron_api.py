"""Integration tests for the build-baron ticket endpoint."""

import pytest
from fastapi.testclient import TestClient
from notifier.channel import get_channel
from notifier.config import NotifierSettings, set_settings
from notifier.resource.host import Host
from notifier.resource.task import Task
from protean import current_domain

UI = "https://ci.example.com"


def _get_test_client():
    from fastapi import FastAPI
    from notifier.api.routes import buildbaron_router

    app = FastAPI()
    app.include_router(buildbaron_router)
    return TestClient(app)


def _add(aggregate):
    current_domain.repository_for(type(aggregate)).add(aggregate)
    return aggregate


@pytest.fixture(autouse=True)
def settings():
    set_settings(NotifierSettings(ui_root=UI))


@pytest.fixture
def task():
    _add(Host.create("h1", host="h1.ci.example.com", distro="rhel80"))
    return _add(
        Task.create(
            "t1",
            display_name="jsCore",
            build_variant="linux-64",
            project="mongodb-mongo-master",
            host_id="h1",
            test_results=[
                {"test_file": "jstests/core/a.js", "url": f"{UI}/test_log/a", "status": "fail"},
                {"test_file": "jstests/core/b.js", "url": f"{UI}/test_log/b", "status": "fail"},
            ],
        )
    )


def _file(client, body, user="alice"):
    headers = {"Api-User": user} if user else {}
    return client.post("/plugin/buildbaron/file_ticket", json=body, headers=headers)


class TestFileTicketAPI:
    def test_files_ticket(self, task):
        resp = _file(_get_test_client(), {"task": "t1", "tests": ["jstests/core/a.js", "jstests/core/b.js"]})

        assert resp.status_code == 200
        assert resp.json() == {"key": "BF-1", "ticket_id": "1"}

        description = get_channel("jira-issue").created[0]["fields"]["description"]
        assert f"{UI}/test_log/a" in description
        assert f"{UI}/test_log/b" in description
        assert f"{UI}/task_history/mongodb-mongo-master/jsCore#a.js=fail" in description
        assert f"{UI}/task_history/mongodb-mongo-master/jsCore#b.js=fail" in description
        assert "[~alice]" in description

    def test_requires_user(self, task):
        resp = _file(_get_test_client(), {"task": "t1", "tests": []}, user=None)
        assert resp.status_code == 401
        assert resp.json()["detail"] == "must be logged in to file a ticket"
        assert get_channel("jira-issue").created == []

    def test_unknown_task(self):
        resp = _file(_get_test_client(), {"task": "missing", "tests": []})
        assert resp.status_code == 404
        assert "task not found for id missing" in resp.json()["detail"]

    def test_missing_host(self):
        _add(Task.create("t2", display_name="jsCore", build_variant="linux-64", project="p", host_id="gone"))
        resp = _file(_get_test_client(), {"task": "t2", "tests": []})
        assert resp.status_code == 500

    def test_undecodable_body(self):
        resp = _get_test_client().post(
            "/plugin/buildbaron/file_ticket",
            content=b"not json",
            headers={"Api-User": "alice", "Content-Type": "application/json"},
        )
        assert resp.status_code == 500

    def test_body_without_task(self):
        resp = _file(_get_test_client(), {"tests": []})
        assert resp.status_code == 500

    def test_jira_failure(self, task):
        get_channel("jira-issue").configure(should_succeed=False, failure_reason="no permission")
        resp = _file(_get_test_client(), {"task": "t1", "tests": []})
        assert resp.status_code == 400
        assert resp.json()["detail"].startswith("error creating JIRA ticket")
