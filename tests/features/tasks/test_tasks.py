"""Tests for the task entity and list source."""

from datetime import datetime, timezone

import pytest

from bizadmin.config.constants import TaskPriority, TaskStatus
from bizadmin.features.pagination.entities.requests import ListQueryState
from bizadmin.features.pagination.utils.search import plan_search
from bizadmin.features.tasks.entities.task import Task
from bizadmin.features.tasks.repositories.task_list_source import TaskListSource

from tests.helpers import json_response, query_params

NOW = datetime(2024, 6, 1, 12, tzinfo=timezone.utc)


class TestTask:
    def test_single_assignee_is_normalized(self):
        task = Task.from_row({"id": "t1", "title": "Sign contract", "status": "Open", "assigned_to": "u1"})
        assert task.assigned_to == ["u1"]

    def test_assignee_list(self):
        task = Task.from_row({"id": "t1", "status": "Open", "assigned_to": ["u1", "u2"]})
        assert task.assigned_to == ["u1", "u2"]

    def test_unknown_values_fall_back(self):
        task = Task.from_row({"id": "t1", "status": "Someday", "priority": "Urgent"})
        assert task.status == TaskStatus.OPEN
        assert task.priority == TaskPriority.MEDIUM
        assert task.assigned_to == []

    def test_pending_and_deadline(self):
        task = Task.from_row(
            {
                "id": "t1",
                "status": "In Progress",
                "deadline": "2024-05-31T00:00:00+00:00",
                "company": {"id": "c1", "company_name": "Acme AG"},
            }
        )
        assert task.is_pending
        assert task.is_past_deadline(NOW)
        assert task.company_name == "Acme AG"
        assert task.company_id == "c1"

    def test_completed_is_never_past_deadline(self):
        task = Task.from_row({"id": "t1", "status": "Completed", "deadline": "2024-01-01T00:00:00Z"})
        assert not task.is_pending
        assert not task.is_past_deadline(NOW)


class TestTaskListSource:
    @pytest.mark.asyncio
    async def test_fetch_scoped_to_company(self, make_db):
        seen = {}

        def handler(request):
            seen["params"] = query_params(request)
            return json_response(
                [{"id": "t1", "title": "Payroll", "status": "In Progress"}], content_range="0-0/1"
            )

        source = TaskListSource(make_db(handler), company_id="c1")
        state = ListQueryState(status_filter="In Progress")

        page = await source.fetch(state, plan_search("pay", source.search_fields))

        assert source.entity == "tasks_companyc1"
        assert seen["params"]["company_id"] == ["eq.c1"]
        assert seen["params"]["status"] == ["eq.In Progress"]
        assert seen["params"]["or"] == ["(title.ilike.%pay%,description.ilike.%pay%)"]
        assert page.items[0].status == TaskStatus.IN_PROGRESS
