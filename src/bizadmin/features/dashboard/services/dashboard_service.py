"""Super admin dashboard aggregation.

All counts are independent ``count=exact`` HEAD queries fired together with
``asyncio.gather``. A failed count is logged, named in ``errors`` and read as
0 so one bad query does not blank the whole dashboard. Only when every query
fails does the fetch raise, which lets the executor fall back to the last
cached dashboard.
"""

import asyncio
import logging
from collections import Counter
from datetime import date
from typing import Any, Awaitable, Dict, List, Mapping

from ....config.constants import FormStatus, TaskStatus, Tables, UserRole
from ....core.exceptions.infrastructure import DatabaseError
from ...cache.services.query_executor import QueryExecutor, QueryResult
from ...database.services.database_client import DatabaseClient
from ...database.services.table_query import TableQuery
from ...database.utils.rows import day_bounds, month_bounds
from ...forms.entities.form_summary import UNKNOWN_COMPANY
from ..entities.stats import CompanyRanking, EmployeeRanking, SuperAdminStats
from ..utils.charts import growth_percentage, month_label, recent_months

logger = logging.getLogger(__name__)

# (table, column holding the submission time)
REPORT_TABLES = (
    (Tables.ACCIDENT_REPORT, "created_at"),
    (Tables.ILLNESS_REPORT, "submission_date"),
    (Tables.STAFF_DEPARTURE_REPORT, "created_at"),
)

TOP_COMPANY_CANDIDATES = 20
TOP_EMPLOYEE_CANDIDATES = 100
RECENT_MONTHS = 5


# Same key every day; the stale fallback may serve a previous day's figures.
DASHBOARD_CACHE_KEY = "dashboard_super_admin_stats"


class DashboardService:
    def __init__(self, db: DatabaseClient, executor: QueryExecutor):
        self._db = db
        self._executor = executor

    async def super_admin_stats(self, today: date, force_refresh: bool = False) -> QueryResult:
        """Aggregate platform-wide counts as of ``today``."""
        return await self._executor.execute(
            lambda: self._collect(today),
            DASHBOARD_CACHE_KEY,
            force_refresh=force_refresh,
            critical_data=True,
        )

    def _count_query(self, table: str) -> TableQuery:
        return self._db.table(table).select("id", count="exact", head=True)

    async def _count(self, query: TableQuery) -> int:
        response = await query.execute()
        return response.count or 0

    async def _gather(self, jobs: Mapping[str, Awaitable[Any]], errors: List[str]) -> Dict[str, Any]:
        """Await all jobs; failed ones are recorded in ``errors`` and yield None."""
        names = list(jobs)
        results = await asyncio.gather(*jobs.values(), return_exceptions=True)

        collected: Dict[str, Any] = {}
        failures: List[DatabaseError] = []
        for name, result in zip(names, results):
            if isinstance(result, DatabaseError):
                logger.error(f"Dashboard query '{name}' failed: {result.message}")
                errors.append(name)
                failures.append(result)
                collected[name] = None
            elif isinstance(result, BaseException):
                raise result
            else:
                collected[name] = result

        if failures and len(failures) == len(names):
            raise failures[0]
        return collected

    async def _collect(self, today: date) -> SuperAdminStats:
        errors: List[str] = []
        start_of_day, _ = day_bounds(today)

        jobs: Dict[str, Awaitable[Any]] = {
            "companies": self._count(self._count_query(Tables.COMPANY)),
            "active_companies": self._count(self._count_query(Tables.COMPANY).eq("active", True)),
            "today_companies": self._count(
                self._count_query(Tables.COMPANY).gte("created_at", start_of_day)
            ),
            "employees": self._count(
                self._count_query(Tables.COMPANY_USER).eq("role", UserRole.EMPLOYEE)
            ),
            "today_employees": self._count(
                self._count_query(Tables.COMPANY_USER)
                .eq("role", UserRole.EMPLOYEE)
                .gte("created_at", start_of_day)
            ),
            "tasks": self._count(self._count_query(Tables.TASKS)),
            "today_tasks": self._count(
                self._count_query(Tables.TASKS).gte("created_at", start_of_day)
            ),
            "pending_tasks": self._count(
                self._count_query(Tables.TASKS).in_("status", TaskStatus.pending())
            ),
            "completed_tasks": self._count(
                self._count_query(Tables.TASKS).eq("status", TaskStatus.COMPLETED)
            ),
            "overdue_tasks": self._count(
                self._count_query(Tables.TASKS).eq("status", TaskStatus.OVERDUE)
            ),
            "company_list": self._db.table(Tables.COMPANY)
            .select("id, company_name")
            .order("created_at", ascending=False)
            .limit(TOP_COMPANY_CANDIDATES)
            .execute(),
        }
        for table, date_column in REPORT_TABLES:
            jobs[table] = self._count(
                self._count_query(table).neq("status", FormStatus.DRAFT)
            )
            jobs[f"today_{table}"] = self._count(
                self._count_query(table)
                .neq("status", FormStatus.DRAFT)
                .gte(date_column, start_of_day)
            )

        months = recent_months(today, RECENT_MONTHS)
        for year, month in months:
            start, end = month_bounds(year, month)
            jobs[f"month_{year}_{month}_companies"] = self._count(
                self._count_query(Tables.COMPANY).gte("created_at", start).lt("created_at", end)
            )
            for table, date_column in REPORT_TABLES:
                jobs[f"month_{year}_{month}_{table}"] = self._count(
                    self._count_query(table)
                    .neq("status", FormStatus.DRAFT)
                    .gte(date_column, start)
                    .lt(date_column, end)
                )

        counts = await self._gather(jobs, errors)

        def value(name: str) -> int:
            return counts.get(name) or 0

        total_forms = sum(value(table) for table, _ in REPORT_TABLES)
        today_forms = sum(value(f"today_{table}") for table, _ in REPORT_TABLES)

        company_rows = counts["company_list"].rows if counts.get("company_list") else []
        top_companies = await self._top_companies(company_rows, start_of_day, errors)
        top_employees = await self._top_employees(errors)

        return SuperAdminStats(
            total_companies=value("companies"),
            active_companies=value("active_companies"),
            company_growth=growth_percentage(value("companies"), value("today_companies")),
            total_employees=value("employees"),
            employee_growth=growth_percentage(value("employees"), value("today_employees")),
            total_tasks=value("tasks"),
            task_growth=growth_percentage(value("tasks"), value("today_tasks")),
            pending_tasks=value("pending_tasks"),
            completed_tasks=value("completed_tasks"),
            overdue_tasks=value("overdue_tasks"),
            total_forms=total_forms,
            form_growth=growth_percentage(total_forms, today_forms),
            month_labels=[month_label(month) for _, month in months],
            monthly_companies=[value(f"month_{y}_{m}_companies") for y, m in months],
            monthly_forms=[
                sum(value(f"month_{y}_{m}_{table}") for table, _ in REPORT_TABLES)
                for y, m in months
            ],
            top_companies=top_companies,
            top_employees=top_employees,
            errors=errors,
        )

    async def _top_companies(
        self,
        company_rows: List[Dict[str, Any]],
        start_of_day: str,
        errors: List[str],
    ) -> List[CompanyRanking]:
        """Companies ranked by employee count, with today's growth each."""
        if not company_rows:
            return []

        jobs: Dict[str, Awaitable[Any]] = {}
        for row in company_rows:
            employees = (
                self._count_query(Tables.COMPANY_USER)
                .eq("company_id", row["id"])
                .eq("role", UserRole.EMPLOYEE)
            )
            jobs[f"company_{row['id']}_employees"] = self._count(employees)
            jobs[f"company_{row['id']}_today_employees"] = self._count(
                self._count_query(Tables.COMPANY_USER)
                .eq("company_id", row["id"])
                .eq("role", UserRole.EMPLOYEE)
                .gte("created_at", start_of_day)
            )

        try:
            counts = await self._gather(jobs, errors)
        except DatabaseError:
            return []

        rankings = []
        for row in company_rows:
            total = counts.get(f"company_{row['id']}_employees") or 0
            today = counts.get(f"company_{row['id']}_today_employees") or 0
            rankings.append(
                CompanyRanking(
                    company_id=str(row["id"]),
                    name=row.get("company_name") or UNKNOWN_COMPANY,
                    employee_count=total,
                    growth_percentage=growth_percentage(total, today),
                )
            )
        rankings.sort(key=lambda ranking: ranking.employee_count, reverse=True)
        return rankings

    async def _top_employees(self, errors: List[str]) -> List[EmployeeRanking]:
        """Employees ranked by the number of non-draft forms filed for them."""
        jobs: Dict[str, Awaitable[Any]] = {
            f"{table}_employees": self._db.table(table)
            .select("employee_id")
            .neq("status", FormStatus.DRAFT)
            .execute()
            for table, _ in REPORT_TABLES
        }
        jobs["employee_list"] = (
            self._db.table(Tables.COMPANY_USER)
            .select("id, first_name, last_name, company_id, company:company_id(company_name)")
            .eq("role", UserRole.EMPLOYEE)
            .limit(TOP_EMPLOYEE_CANDIDATES)
            .execute()
        )

        try:
            results = await self._gather(jobs, errors)
        except DatabaseError:
            return []
        if any(result is None for result in results.values()):
            return []

        form_counts: Counter = Counter()
        for table, _ in REPORT_TABLES:
            form_counts.update(
                row["employee_id"] for row in results[f"{table}_employees"].rows if row.get("employee_id")
            )

        rankings = [
            EmployeeRanking(
                employee_id=str(row["id"]),
                name=f"{row.get('first_name') or ''} {row.get('last_name') or ''}".strip(),
                company_name=(row.get("company") or {}).get("company_name") or UNKNOWN_COMPANY,
                forms_count=form_counts.get(row["id"], 0),
            )
            for row in results["employee_list"].rows
        ]
        rankings.sort(key=lambda ranking: ranking.forms_count, reverse=True)
        return rankings
