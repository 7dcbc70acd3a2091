"""List sources for company users and super admins."""

import logging
from typing import Optional

from ....config.constants import Tables, UserRole
from ...database.services.database_client import DatabaseClient
from ...pagination.entities.requests import ListQueryState
from ...pagination.entities.responses import PagedResult
from ...pagination.utils.search import SearchPlan
from ..entities.admin import Admin
from ..entities.company_user import CompanyUser

logger = logging.getLogger(__name__)

_ROLE_ENTITIES = {
    UserRole.EMPLOYEE: "employees",
    UserRole.COMPANY_ADMIN: "company_admins",
}


class CompanyUserListSource:
    """Pages of company users with one role, optionally within one company."""

    search_fields = ("first_name", "last_name", "email", "job_title")

    def __init__(
        self,
        db: DatabaseClient,
        role: UserRole = UserRole.EMPLOYEE,
        company_id: Optional[str] = None,
    ):
        if role not in _ROLE_ENTITIES:
            raise ValueError(f"Company users cannot have role {role.value}")

        self._db = db
        self.role = role
        self.company_id = company_id
        base = _ROLE_ENTITIES[role]
        self.entity = f"{base}_company{company_id}" if company_id else base

    async def fetch(self, state: ListQueryState, plan: SearchPlan) -> PagedResult[CompanyUser]:
        query = (
            self._db.table(Tables.COMPANY_USER)
            .select("*, company:company_id(id, company_name)", count="exact")
            .eq("role", self.role)
        )
        if self.company_id:
            query.eq("company_id", self.company_id)
        if state.status_filter:
            query.eq("active_status", state.status_filter)

        plan.apply(query)
        query.order("created_at", ascending=state.sort_order.ascending)
        query.range(state.offset, state.range_end)

        response = await query.execute()
        return PagedResult(
            items=[CompanyUser.from_row(row) for row in response.rows],
            total_count=response.count,
        )


class AdminListSource:
    """Pages of super admins."""

    entity = "admins"
    search_fields = ("name", "email")

    def __init__(self, db: DatabaseClient):
        self._db = db

    async def fetch(self, state: ListQueryState, plan: SearchPlan) -> PagedResult[Admin]:
        query = (
            self._db.table(Tables.ADMIN)
            .select("*", count="exact")
            .eq("role", UserRole.SUPER_ADMIN)
        )
        if state.status_filter:
            query.eq("status", state.status_filter)

        plan.apply(query)
        query.order("created_at", ascending=state.sort_order.ascending)
        query.range(state.offset, state.range_end)

        response = await query.execute()
        return PagedResult(
            items=[Admin.from_row(row) for row in response.rows],
            total_count=response.count,
        )
