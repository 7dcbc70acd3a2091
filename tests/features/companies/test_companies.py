"""Tests for company entities, list source and repository."""

import httpx
import pytest

from bizadmin.features.companies.entities.company import Company
from bizadmin.features.companies.repositories.company_list_source import CompanyListSource
from bizadmin.features.companies.repositories.company_repository import (
    CompanyDetails,
    CompanyRepository,
    details_cache_key,
)
from bizadmin.features.pagination.entities.requests import ListQueryState
from bizadmin.features.pagination.utils.search import plan_search

from tests.helpers import count_response, json_response, query_params

COMPANY_ROW = {
    "id": "c1",
    "company_name": "Acme AG",
    "registration_number": "CHE-123",
    "industry_type": "Manufacturing",
    "contact_email": "info@acme.example",
    "active": True,
    "address": {"line1": "Main St 1", "city": "Zurich", "country": "Switzerland"},
    "stakeholders": [{"name": "Jane", "percentage": 60}, {"name": "John", "percentage": "40"}],
    "created_at": "2024-01-05T09:00:00+00:00",
}


class TestCompanyEntity:
    def test_from_row(self):
        company = Company.from_row(COMPANY_ROW)

        assert company.company_name == "Acme AG"
        assert company.status_label == "active"
        assert company.address.formatted == "Main St 1, Zurich, Switzerland"
        assert [s.percentage for s in company.stakeholders] == [60.0, 40.0]
        assert company.created_at.year == 2024

    def test_minimal_row(self):
        company = Company.from_row({"id": 7, "active": False})

        assert company.id == "7"
        assert company.address is None
        assert company.stakeholders == []
        assert company.to_summary()["active"] is False


class TestCompanyListSource:
    @pytest.mark.asyncio
    async def test_fetch_builds_filtered_page(self, make_db):
        seen = {}

        def handler(request):
            seen["request"] = request
            return json_response([COMPANY_ROW], status_code=206, content_range="10-10/11")

        source = CompanyListSource(make_db(handler))
        state = ListQueryState(search_text="acme", status_filter="active", page_index=1)

        page = await source.fetch(state, plan_search("acme", source.search_fields))

        params = query_params(seen["request"])
        assert seen["request"].url.path == "/rest/v1/company"
        assert params["active"] == ["eq.true"]
        assert params["or"][0].startswith("(company_name.ilike.%acme%,registration_number.ilike.%acme%")
        assert params["order"] == ["created_at.desc"]
        assert seen["request"].headers["Range"] == "10-19"
        assert page.total_count == 11
        assert page.items[0].company_name == "Acme AG"
        assert not page.has_more(state.offset, state.page_size)

    @pytest.mark.asyncio
    async def test_inactive_filter(self, make_db):
        seen = {}

        def handler(request):
            seen["params"] = query_params(request)
            return json_response([], content_range="*/0")

        source = CompanyListSource(make_db(handler))
        await source.fetch(ListQueryState(status_filter="inactive"), plan_search("", ()))

        assert seen["params"]["active"] == ["eq.false"]
        assert "or" not in seen["params"]


def details_handler(request: httpx.Request) -> httpx.Response:
    params = query_params(request)
    if request.url.path == "/rest/v1/company":
        if request.method == "PATCH":
            return json_response([{**COMPANY_ROW, "active": False}])
        return json_response(COMPANY_ROW)
    if request.method == "HEAD":
        return count_response(3 if "active_status" in params else 5)
    return json_response(
        [{"id": "u1", "company_id": "c1", "first_name": "Ada", "last_name": "Admin", "role": "admin"}]
    )


class TestCompanyRepository:
    @pytest.mark.asyncio
    async def test_details(self, make_db, executor):
        repository = CompanyRepository(make_db(details_handler), executor)

        result = await repository.get_details("c1")

        details = result.data
        assert isinstance(details, CompanyDetails)
        assert details.company.id == "c1"
        assert [admin.full_name for admin in details.admins] == ["Ada Admin"]
        assert details.total_employees == 5
        assert details.active_employees == 3

    @pytest.mark.asyncio
    async def test_details_are_cached(self, make_db, executor, memory_cache):
        calls = []

        def handler(request):
            calls.append(request)
            return details_handler(request)

        repository = CompanyRepository(make_db(handler), executor)
        await repository.get_details("c1")
        await repository.get_details("c1")

        assert len(calls) == 4
        assert details_cache_key("c1") in memory_cache

    @pytest.mark.asyncio
    async def test_set_active_invalidates(self, make_db, executor, memory_cache):
        repository = CompanyRepository(make_db(details_handler), executor)
        await repository.get_details("c1")
        await memory_cache.set("companies__page0_size10_statusall_sortdesc", [])
        await memory_cache.set("company_options", [])
        await memory_cache.set("forms__page0_size10_statusall_sortdesc", [])

        company = await repository.set_active("c1", False)

        assert company.active is False
        assert memory_cache.keys() == ["forms__page0_size10_statusall_sortdesc"]

    @pytest.mark.asyncio
    async def test_set_active_leaves_other_companies(self, make_db, executor, memory_cache):
        repository = CompanyRepository(make_db(details_handler), executor)
        await memory_cache.set(details_cache_key("c10"), {})

        await repository.set_active("c1", True)

        assert details_cache_key("c10") in memory_cache

    @pytest.mark.asyncio
    async def test_list_active(self, make_db, executor):
        seen = {}

        def handler(request):
            seen["params"] = query_params(request)
            return json_response([{"id": "c1", "company_name": "Acme AG", "active": True}])

        result = await CompanyRepository(make_db(handler), executor).list_active()

        assert seen["params"]["active"] == ["eq.true"]
        assert seen["params"]["order"] == ["company_name.asc"]
        assert [company.company_name for company in result.data] == ["Acme AG"]
