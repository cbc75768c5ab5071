"""Tests for wren.http.query — immutable QueryParams."""

import pytest

from wren.http.query import QueryParams


class TestQueryParams:
    def test_getitem(self) -> None:
        q = QueryParams("q=hello&page=2")
        assert q["q"] == "hello"
        assert q["page"] == "2"

    def test_equals_plain_dict(self) -> None:
        assert QueryParams("x=1&y=2") == {"x": "1", "y": "2"}

    def test_empty(self) -> None:
        q = QueryParams("")
        assert len(q) == 0
        assert q == {}

    def test_missing_key_raises(self) -> None:
        q = QueryParams("q=hello")
        with pytest.raises(KeyError):
            q["missing"]

    def test_last_value_wins(self) -> None:
        q = QueryParams("tag=python&tag=rust")
        assert q["tag"] == "rust"
        assert q.get("tag") == "rust"

    def test_get_list(self) -> None:
        q = QueryParams("tag=python&tag=rust&q=hello")
        assert q.get_list("tag") == ["python", "rust"]
        assert q.get_list("missing") == []

    def test_get_with_default(self) -> None:
        q = QueryParams("q=hello")
        assert q.get("missing") is None
        assert q.get("missing", "fallback") == "fallback"

    def test_percent_and_plus_decoding(self) -> None:
        q = QueryParams("name=Ada%20Lovelace&city=New+York")
        assert q["name"] == "Ada Lovelace"
        assert q["city"] == "New York"

    def test_blank_values_kept(self) -> None:
        q = QueryParams("flag=&x=1")
        assert q["flag"] == ""

    def test_raw(self) -> None:
        assert QueryParams("a=1&b=2").raw == "a=1&b=2"

    def test_immutable(self) -> None:
        q = QueryParams("a=1")
        with pytest.raises(AttributeError):
            q.other = "x"  # type: ignore[attr-defined]

    def test_repr(self) -> None:
        assert repr(QueryParams("a=1")) == "QueryParams({'a': '1'})"
