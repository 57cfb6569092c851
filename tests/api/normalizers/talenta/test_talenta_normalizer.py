"""Testes do normalizer de respostas Talenta."""

from __future__ import annotations

from api.normalizers.talenta import (
    extract_page_items,
    extract_pagination_metadata,
    find_first_array,
    normalize_response,
)


class TestNormalizeResponse:
    """Achatamento de respostas em linhas."""

    def test_nested_array_becomes_rows(self) -> None:
        body = {"data": {"employees": [{"id": 1}, {"id": 2}]}}

        assert normalize_response(body) == [{"id": 1}, {"id": 2}]

    def test_bare_string_is_wrapped(self) -> None:
        assert normalize_response("OK") == [{"response": "OK"}]

    def test_object_without_array_is_single_row(self) -> None:
        assert normalize_response({"status": "ok"}) == [{"status": "ok"}]

    def test_top_level_array_field(self) -> None:
        body = {"items": [{"id": 1}], "data": {"other": [{"id": 9}]}}

        assert normalize_response(body) == [{"id": 1}]

    def test_response_container(self) -> None:
        body = {"response": {"requests": [{"id": "a"}]}}

        assert normalize_response(body) == [{"id": "a"}]

    def test_first_sibling_array_wins(self) -> None:
        body = {"data": {"overtime": [{"id": 1}], "approvals": [{"id": 2}]}}

        assert normalize_response(body) == [{"id": 1}]

    def test_list_body_with_scalars(self) -> None:
        assert normalize_response([{"id": 1}, "x"]) == [{"id": 1}, {"response": "x"}]

    def test_empty_array_emits_no_rows(self) -> None:
        assert normalize_response({"data": {"employees": []}}) == []

    def test_none_emits_no_rows(self) -> None:
        assert normalize_response(None) == []

    def test_deeper_arrays_are_not_searched(self) -> None:
        body = {"data": {"employee": {"history": [{"id": 1}]}}}

        assert normalize_response(body) == [body]


class TestPagination:
    """Itens e metadados por página."""

    def test_extract_page_items(self) -> None:
        body = {"data": {"employees": [{"id": 1}], "pagination": {"current_page": 1}}}

        assert extract_page_items(body) == [{"id": 1}]

    def test_page_items_prefer_data_over_root_arrays(self) -> None:
        body = {
            "errors": [],
            "data": {"employees": [{"id": 1}, {"id": 2}], "pagination": {"last_page": 2}},
        }

        assert extract_page_items(body) == [{"id": 1}, {"id": 2}]

    def test_page_items_fall_back_to_root_array(self) -> None:
        assert extract_page_items({"items": [{"id": 1}], "data": {"total": 1}}) == [{"id": 1}]

    def test_extract_page_items_without_array(self) -> None:
        assert extract_page_items({"message": "ok"}) == []
        assert extract_page_items("OK") == []

    def test_metadata_in_data_pagination(self) -> None:
        body = {"data": {"pagination": {"current_page": 2, "last_page": 5}}}

        assert extract_pagination_metadata(body) == (2, 5)

    def test_metadata_at_root(self) -> None:
        assert extract_pagination_metadata({"current_page": "3", "last_page": "3"}) == (3, 3)

    def test_metadata_absent(self) -> None:
        assert extract_pagination_metadata({"data": {"employees": []}}) is None
        assert extract_pagination_metadata({"data": {"current_page": 1}}) is None
        assert extract_pagination_metadata([]) is None

    def test_find_first_array_none(self) -> None:
        assert find_first_array({"data": "x"}) is None
        assert find_first_array(42) is None
