"""Combined list of accident, illness and staff departure reports.

Each page fetches the same range from all three report tables concurrently,
excluding drafts, and merges the rows into ``FormSummary`` items ordered by
submission date. Search runs over the merged rows because employee and
company names come from embedded relations.
"""

import asyncio
import logging
from typing import Dict, Iterable, List, Optional, Sequence

from ....config.constants import FormStatus, FormType, Tables
from ...database.entities.query_response import QueryResponse
from ...database.services.database_client import DatabaseClient
from ...pagination.entities.requests import ListQueryState
from ...pagination.entities.responses import PagedResult
from ...pagination.utils.search import SearchPlan
from ..entities.form_summary import FormSummary
from ..entities.reports import (
    EMPLOYEE_EMBED,
    AccidentReport,
    IllnessReport,
    StaffDepartureReport,
)

logger = logging.getLogger(__name__)

# (table, date column used for ordering, entity)
FORM_TABLES = {
    FormType.ACCIDENT: (Tables.ACCIDENT_REPORT, "created_at", AccidentReport),
    FormType.ILLNESS: (Tables.ILLNESS_REPORT, "submission_date", IllnessReport),
    FormType.DEPARTURE: (Tables.STAFF_DEPARTURE_REPORT, "created_at", StaffDepartureReport),
}


class FormListSource:
    """Pages of submitted forms across the three report tables."""

    search_fields: Sequence[str] = ()

    def __init__(
        self,
        db: DatabaseClient,
        form_types: Optional[Iterable[FormType]] = None,
        company_id: Optional[str] = None,
    ):
        self._db = db
        self.form_types = tuple(form_types) if form_types else tuple(FORM_TABLES)
        self.company_id = company_id

        entity = "forms"
        if form_types:
            entity += "_" + "-".join(form_type.value for form_type in self.form_types)
        if company_id:
            entity += f"_company{company_id}"
        self.entity = entity

    async def fetch(self, state: ListQueryState, plan: SearchPlan) -> PagedResult[FormSummary]:
        responses = await asyncio.gather(
            *(self._fetch_table(form_type, state) for form_type in self.form_types)
        )

        reports = []
        next_available = False
        total = 0
        for form_type, response in zip(self.form_types, responses):
            _, _, entity = FORM_TABLES[form_type]
            rows = response.rows
            reports.extend((form_type, entity.from_row(row)) for row in rows)
            if response.count is not None:
                total += response.count
                if state.offset + len(rows) < response.count:
                    next_available = True
            elif len(rows) >= state.page_size:
                next_available = True

        modifier_names = await self._modifier_names(
            report.modified_by for _, report in reports if report.modified_by
        )

        items = [
            FormSummary.from_report(form_type, report, modifier_names.get(report.modified_by))
            for form_type, report in reports
        ]
        items.sort(key=lambda item: item.sort_key, reverse=not state.sort_order.ascending)

        if not plan.is_empty:
            items = [item for item in items if item.matches(plan.text)]
            return PagedResult(items=items, total_count=None, next_available=next_available)

        return PagedResult(items=items, total_count=total, next_available=next_available)

    async def _fetch_table(self, form_type: FormType, state: ListQueryState) -> QueryResponse:
        table, date_column, _ = FORM_TABLES[form_type]
        query = (
            self._db.table(table)
            .select(f"*, {EMPLOYEE_EMBED}", count="exact")
            .neq("status", FormStatus.DRAFT)
        )
        if self.company_id:
            query.eq("company_id", self.company_id)
        if state.status_filter:
            query.eq("status", state.status_filter)

        query.order(date_column, ascending=state.sort_order.ascending)
        query.range(state.offset, state.range_end)
        return await query.execute()

    async def _modifier_names(self, ids: Iterable[str]) -> Dict[str, str]:
        """Names of the admins or company users who last modified the forms."""
        unique_ids: List[str] = sorted(set(ids))
        if not unique_ids:
            return {}

        admins, users = await asyncio.gather(
            self._db.table(Tables.ADMIN).select("id, name").in_("id", unique_ids).execute(),
            self._db.table(Tables.COMPANY_USER)
            .select("id, first_name, last_name")
            .in_("id", unique_ids)
            .execute(),
        )

        names = {row["id"]: row.get("name") or "" for row in admins.rows}
        names.update(
            {
                row["id"]: f"{row.get('first_name') or ''} {row.get('last_name') or ''}".strip()
                for row in users.rows
            }
        )
        return names
