"""Company reads and writes outside the paged list.

Details are cached per company; any write invalidates that company's
details and every cached companies page.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ....config.constants import Tables, UserRole, UserStatus
from ...cache.services.query_executor import QueryExecutor, QueryResult
from ...database.services.database_client import DatabaseClient
from ...users.entities.company_user import CompanyUser
from ..entities.company import Company

logger = logging.getLogger(__name__)

DETAIL_COLUMNS = (
    "id, company_name, registration_number, industry_type, contact_number, "
    "contact_email, address, active, vat_type, stakeholders"
)


@dataclass
class CompanyDetails:
    company: Company
    admins: List[CompanyUser] = field(default_factory=list)
    total_employees: int = 0
    active_employees: int = 0


def details_cache_key(company_id: str) -> str:
    return f"company_{company_id}_details"


class CompanyRepository:
    def __init__(self, db: DatabaseClient, executor: QueryExecutor):
        self._db = db
        self._executor = executor

    async def get_details(self, company_id: str, force_refresh: bool = False) -> QueryResult:
        """Company row, its admins and employee counts, fetched concurrently."""

        async def fetch() -> CompanyDetails:
            company_query = (
                self._db.table(Tables.COMPANY).select(DETAIL_COLUMNS).eq("id", company_id).single()
            )
            admins_query = (
                self._db.table(Tables.COMPANY_USER)
                .select("id, company_id, first_name, last_name, email, phone_number, role, active_status")
                .eq("company_id", company_id)
                .eq("role", UserRole.COMPANY_ADMIN)
                .order("first_name")
            )
            total_query = (
                self._db.table(Tables.COMPANY_USER)
                .select("id", count="exact", head=True)
                .eq("company_id", company_id)
            )
            active_query = (
                self._db.table(Tables.COMPANY_USER)
                .select("id", count="exact", head=True)
                .eq("company_id", company_id)
                .eq("active_status", UserStatus.ACTIVE)
            )

            company, admins, total, active = await asyncio.gather(
                company_query.execute(),
                admins_query.execute(),
                total_query.execute(),
                active_query.execute(),
            )
            return CompanyDetails(
                company=Company.from_row(company.data),
                admins=[CompanyUser.from_row(row) for row in admins.rows],
                total_employees=total.count or 0,
                active_employees=active.count or 0,
            )

        return await self._executor.execute(
            fetch,
            details_cache_key(company_id),
            force_refresh=force_refresh,
            critical_data=True,
        )

    async def list_active(self) -> QueryResult:
        """Active companies ordered by name, for company pickers."""

        async def fetch() -> List[Company]:
            response = await (
                self._db.table(Tables.COMPANY)
                .select("id, company_name, active")
                .eq("active", True)
                .order("company_name")
                .execute()
            )
            return [Company.from_row(row) for row in response.rows]

        return await self._executor.execute(fetch, "company_options", critical_data=True)

    async def set_active(self, company_id: str, active: bool) -> Optional[Company]:
        """Activate or deactivate a company and drop the cached views of it."""
        rows = await self._db.update(Tables.COMPANY, {"active": active}, {"id": company_id})
        logger.info(f"Company {company_id} set {'active' if active else 'inactive'}")

        await self._executor.invalidate(details_cache_key(company_id))
        await self._executor.invalidate("companies_")
        await self._executor.invalidate("company_options")

        return Company.from_row(rows[0]) if rows else None
