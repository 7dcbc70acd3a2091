"""Company list source."""

import logging

from ....config.constants import Tables
from ...database.services.database_client import DatabaseClient
from ...pagination.entities.requests import ListQueryState
from ...pagination.entities.responses import PagedResult
from ...pagination.utils.search import SearchPlan
from ..entities.company import Company

logger = logging.getLogger(__name__)

LIST_COLUMNS = (
    "id, company_name, registration_number, industry_type, "
    "contact_number, contact_email, active, created_at"
)


class CompanyListSource:
    """Pages of companies, searchable by name, registration, industry and contact."""

    entity = "companies"
    search_fields = (
        "company_name",
        "registration_number",
        "industry_type",
        "contact_email",
        "contact_number",
    )

    def __init__(self, db: DatabaseClient):
        self._db = db

    async def fetch(self, state: ListQueryState, plan: SearchPlan) -> PagedResult[Company]:
        query = self._db.table(Tables.COMPANY).select(LIST_COLUMNS, count="exact")

        if state.status_filter == "active":
            query.eq("active", True)
        elif state.status_filter == "inactive":
            query.eq("active", False)

        plan.apply(query)
        query.order("created_at", ascending=state.sort_order.ascending)
        query.range(state.offset, state.range_end)

        response = await query.execute()
        logger.debug(f"Fetched {len(response.rows)} companies (total {response.count})")
        return PagedResult(
            items=[Company.from_row(row) for row in response.rows],
            total_count=response.count,
        )
