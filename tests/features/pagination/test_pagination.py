"""Tests for list query state, paged results, search planning and cache keys."""

import pytest

from bizadmin.features.database.services.table_query import TableQuery
from bizadmin.features.pagination.entities.requests import ListQueryState, SortOrder
from bizadmin.features.pagination.entities.responses import PagedResult
from bizadmin.features.pagination.utils.cache_keys import build_cache_key, search_prefix
from bizadmin.features.pagination.utils.search import SearchMode, plan_search


class TestListQueryState:
    def test_defaults(self):
        state = ListQueryState()
        assert state.page_size == 10
        assert state.sort_order == SortOrder.DESC
        assert state.status_key == "all"
        assert state.offset == 0
        assert state.range_end == 9

    def test_paging(self):
        state = ListQueryState(page_size=10).next_page().next_page()
        assert state.page_index == 2
        assert state.offset == 20
        assert state.range_end == 29
        assert state.reset_page().page_index == 0
        assert state.with_page(5).offset == 50

    def test_validation(self):
        with pytest.raises(ValueError):
            ListQueryState(page_index=-1)
        with pytest.raises(ValueError):
            ListQueryState(page_size=0)

    def test_normalized_search(self):
        assert ListQueryState(search_text="  AcMe ").normalized_search == "acme"


class TestPagedResult:
    def test_short_page_is_last(self):
        assert not PagedResult(items=[1, 2, 3], total_count=None).has_more(0, 10)

    def test_full_page_with_unknown_total(self):
        assert PagedResult(items=list(range(10))).has_more(0, 10)

    def test_full_page_with_total(self):
        page = PagedResult(items=list(range(10)), total_count=20)
        assert page.has_more(0, 10)
        assert not page.has_more(10, 10)

    def test_next_available_wins(self):
        assert PagedResult(items=[1], next_available=True).has_more(0, 10)
        assert not PagedResult(items=list(range(10)), total_count=99, next_available=False).has_more(0, 10)


class TestSearchPlan:
    def test_empty_text(self):
        plan = plan_search("   ", ["company_name"])
        assert plan.is_empty
        assert plan.debounce_seconds == 0.0
        assert plan.filter_expression() is None

    def test_short_text_is_prefix(self):
        plan = plan_search("Ac", ["company_name", "industry_type"], short_debounce=0.3, long_debounce=0.5)
        assert plan.mode == SearchMode.PREFIX
        assert plan.debounce_seconds == 0.3
        assert plan.filter_expression() == "company_name.ilike.ac%,industry_type.ilike.ac%"

    def test_long_text_is_contains(self):
        plan = plan_search(" ACME ", ["company_name"], short_debounce=0.3, long_debounce=0.5)
        assert plan.mode == SearchMode.CONTAINS
        assert plan.text == "acme"
        assert plan.debounce_seconds == 0.5
        assert plan.pattern == "%acme%"

    def test_reserved_characters_are_quoted(self):
        plan = plan_search("smith, john", ["last_name"])
        assert plan.filter_expression() == 'last_name.ilike."%smith, john%"'

    def test_apply_adds_or_group(self):
        query = TableQuery("company")
        plan_search("acme", ["company_name", "contact_email"]).apply(query)
        assert ("or", "(company_name.ilike.%acme%,contact_email.ilike.%acme%)") in query.build_params()

    def test_apply_without_text_is_noop(self):
        query = TableQuery("company")
        plan_search("", ["company_name"]).apply(query)
        assert query.filters == []


class TestCacheKeys:
    def test_key_covers_every_parameter(self):
        state = ListQueryState(
            search_text="Acme", status_filter="active", sort_order=SortOrder.ASC, page_index=2, page_size=10
        )
        assert build_cache_key("companies", state) == "companies_acme_page2_size10_statusactive_sortasc"

    def test_default_key(self):
        assert build_cache_key("forms", ListQueryState()) == "forms__page0_size10_statusall_sortdesc"

    def test_keys_differ_by_filter(self):
        a = build_cache_key("tasks", ListQueryState(status_filter="Open"))
        b = build_cache_key("tasks", ListQueryState(status_filter="Completed"))
        assert a != b

    def test_search_prefix_matches_keys(self):
        state = ListQueryState(search_text=" Acme")
        assert build_cache_key("companies", state).startswith(search_prefix("companies", "Acme "))

    def test_search_prefix_stays_inside_entity_and_term(self):
        scoped = build_cache_key("tasks_company5", ListQueryState())
        longer = build_cache_key("companies", ListQueryState(search_text="acme 10"))

        assert not scoped.startswith(search_prefix("tasks"))
        assert not longer.startswith(search_prefix("companies", "acme 1"))
