"""Unit tests for query and response models."""

import pytest
from pydantic import ValidationError

from searchbase.core.enums import SortDirection
from searchbase.models import ErrorBody, Filter, Query, Range, SearchResponse, Sort


class TestQuery:
    def test_requires_index(self):
        with pytest.raises(ValidationError):
            Query(index="")

    def test_defaults(self):
        q = Query(index="articles")
        assert q.filters == ()
        assert q.sort == ()
        assert q.select == ()
        assert q.limit is None
        assert q.offset is None
        assert not q.is_paged

    def test_frozen(self):
        q = Query(index="articles")
        with pytest.raises(ValidationError):
            q.limit = 10

    @pytest.mark.parametrize("fields", [{"limit": 10}, {"offset": 0}])
    def test_is_paged(self, fields):
        assert Query(index="articles", **fields).is_paged

    def test_with_page_keeps_other_fields(self):
        q = Query(
            index="articles",
            filters=[Filter(field="a", op="==", value=1)],
            sort=[Sort(field="b", direction="DESC")],
            select=["id"],
        )
        paged = q.with_page(100, 200)
        assert paged.limit == 100
        assert paged.offset == 200
        assert paged.filters == q.filters
        assert paged.sort == q.sort
        assert paged.select == q.select
        assert q.limit is None

    def test_from_mapping(self):
        q = Query.model_validate(
            {"index": "articles", "sort": [{"field": "title", "direction": "ASC"}]}
        )
        assert q.sort[0].direction is SortDirection.ASCENDING


class TestSearchResponse:
    def test_decode(self):
        payload = {
            "total": 3,
            "range": {"start": 0, "end": 2},
            "records": [{"id": "1"}, {"id": "2"}],
        }
        response = SearchResponse.model_validate(payload)
        assert response.total == 3
        assert response.range == Range(start=0, end=2)
        assert response.model_dump() == payload

    def test_null_total_is_zero(self):
        response = SearchResponse.model_validate_json(
            '{"total": null, "range": {"start": 0, "end": 0}, "records": []}'
        )
        assert response.total == 0

    def test_missing_total_is_zero(self):
        response = SearchResponse.model_validate({"range": {"start": 0, "end": 1}, "records": [1]})
        assert response.total == 0

    def test_missing_range_invalid(self):
        with pytest.raises(ValidationError):
            SearchResponse.model_validate({"total": 1, "records": []})

    def test_records_kept_opaque(self):
        records = [{"id": 1, "nested": {"x": [1, 2]}}, "plain", 42]
        response = SearchResponse.model_validate(
            {"total": 3, "range": {"start": 0, "end": 3}, "records": records}
        )
        assert response.records == records


class TestErrorBody:
    def test_message(self):
        assert ErrorBody.model_validate_json('{"message": "boom"}').message == "boom"

    def test_message_optional(self):
        assert ErrorBody.model_validate_json('{"error": "x"}').message is None

    def test_non_json_invalid(self):
        with pytest.raises(ValidationError):
            ErrorBody.model_validate_json("<html>Bad Gateway</html>")
