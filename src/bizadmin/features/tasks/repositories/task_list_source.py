"""Task list source."""

from typing import Optional

from ....config.constants import Tables
from ...database.services.database_client import DatabaseClient
from ...pagination.entities.requests import ListQueryState
from ...pagination.entities.responses import PagedResult
from ...pagination.utils.search import SearchPlan
from ..entities.task import Task

TASK_COLUMNS = (
    "id, title, description, status, priority, deadline, created_at, updated_at, "
    "modified_by, assigned_to, reminder_days_before, company:company_id(id, company_name)"
)


class TaskListSource:
    """Pages of tasks, optionally scoped to a company."""

    search_fields = ("title", "description")

    def __init__(self, db: DatabaseClient, company_id: Optional[str] = None):
        self._db = db
        self.company_id = company_id
        self.entity = f"tasks_company{company_id}" if company_id else "tasks"

    async def fetch(self, state: ListQueryState, plan: SearchPlan) -> PagedResult[Task]:
        query = self._db.table(Tables.TASKS).select(TASK_COLUMNS, count="exact")
        if self.company_id:
            query.eq("company_id", self.company_id)
        if state.status_filter:
            query.eq("status", state.status_filter)

        plan.apply(query)
        query.order("created_at", ascending=state.sort_order.ascending)
        query.range(state.offset, state.range_end)

        response = await query.execute()
        return PagedResult(
            items=[Task.from_row(row) for row in response.rows],
            total_count=response.count,
        )
