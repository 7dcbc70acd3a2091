"""Tests for PostgREST query building."""

from datetime import date, datetime, timezone

import pytest

from bizadmin.config.constants import FormStatus, TaskStatus
from bizadmin.features.database.services.table_query import TableQuery, format_value, quote_value


class TestFormatValue:
    def test_scalars(self):
        assert format_value(True) == "true"
        assert format_value(False) == "false"
        assert format_value(None) == "null"
        assert format_value(42) == "42"
        assert format_value(FormStatus.DRAFT) == "draft"

    def test_dates(self):
        assert format_value(date(2024, 3, 1)) == "2024-03-01"
        moment = datetime(2024, 3, 1, 8, 30, tzinfo=timezone.utc)
        assert format_value(moment) == "2024-03-01T08:30:00+00:00"

    def test_quote_reserved_characters(self):
        assert quote_value("plain") == "plain"
        assert quote_value(TaskStatus.IN_PROGRESS) == '"In Progress"'
        assert quote_value("a,b") == '"a,b"'
        assert quote_value('say "hi"') == '"say \\"hi\\""'
        assert quote_value(5) == "5"


class TestTableQuery:
    def test_filters_render_in_order(self):
        query = (
            TableQuery("company")
            .select("id, company_name", count="exact")
            .eq("active", True)
            .neq("status", FormStatus.DRAFT)
            .gte("created_at", "2024-01-01")
            .lt("created_at", "2024-02-01")
            .order("created_at", ascending=False)
        )

        assert query.build_params() == [
            ("select", "id, company_name"),
            ("active", "eq.true"),
            ("status", "neq.draft"),
            ("created_at", "gte.2024-01-01"),
            ("created_at", "lt.2024-02-01"),
            ("order", "created_at.desc"),
        ]
        assert query.build_headers() == {"Prefer": "count=exact"}
        assert query.method == "GET"

    def test_eq_none_uses_is_null(self):
        query = TableQuery("tasks").eq("deadline", None)
        assert ("deadline", "is.null") in query.build_params()

    def test_in_filter_quotes_values(self):
        query = TableQuery("tasks").in_("status", TaskStatus.pending())
        assert ("status", 'in.(Open,"In Progress","Awaiting Response")') in query.build_params()

    def test_or_group_and_ilike(self):
        query = TableQuery("company").or_("company_name.ilike.ac%,industry_type.ilike.ac%").ilike("city", "%zur%")
        params = query.build_params()
        assert ("or", "(company_name.ilike.ac%,industry_type.ilike.ac%)") in params
        assert ("city", "ilike.%zur%") in params

    def test_range_sets_headers(self):
        headers = TableQuery("company").range(10, 19).build_headers()
        assert headers["Range"] == "10-19"
        assert headers["Range-Unit"] == "items"

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            TableQuery("company").range(5, 4)
        with pytest.raises(ValueError):
            TableQuery("company").range(-1, 4)

    def test_head_count(self):
        query = TableQuery("company").select("id", count="exact", head=True)
        assert query.method == "HEAD"
        assert query.is_head

    def test_single_and_limit(self):
        query = TableQuery("company").eq("id", "c1").single().limit(1)
        assert query.is_single
        assert query.build_headers()["Accept"] == "application/vnd.pgrst.object+json"
        assert ("limit", "1") in query.build_params()

    def test_filters_exclude_select_and_order(self):
        query = TableQuery("tasks").select("id").eq("id", "t1").order("created_at")
        assert query.filters == [("id", "eq.t1")]

    @pytest.mark.asyncio
    async def test_unbound_query_cannot_execute(self):
        with pytest.raises(RuntimeError):
            await TableQuery("company").execute()
