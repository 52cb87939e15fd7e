"""
Unit tests for nested record building and record tree helpers.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from csvloader.core.parsing import (
    EXTRAS_KEY,
    Empty,
    Leaf,
    Node,
    build_record,
    flatten_record,
    has_content,
    lookup,
    upsert_path,
)

HEADER = [
    "name.firstName",
    "name.lastName",
    "age",
    "address.line1",
    "address.city",
    "address.geo.lat",
    "gender",
]


@pytest.mark.unit
class TestBuildRecord:
    """Tests for build_record"""

    def test_dotted_keys_become_nested(self):
        record = build_record(["address.city", "address.state"], ["Pune", "Maharashtra"])
        assert record == {"address": {"city": "Pune", "state": "Maharashtra"}}

    def test_flat_and_nested_keys(self):
        record = build_record(
            ["name.firstName", "name.lastName", "age"],
            ["Rohit", "Prasad", "35"]
        )
        assert record == {"name": {"firstName": "Rohit", "lastName": "Prasad"}, "age": "35"}

    def test_short_row_is_padded(self):
        record = build_record(["a", "b.c", "d"], ["1"])
        assert record == {"a": "1", "b": {"c": ""}, "d": ""}

    def test_empty_row_is_padded(self):
        assert build_record(["a", "b"], []) == {"a": "", "b": ""}

    def test_surplus_fields_kept_under_extras(self):
        record = build_record(["a"], ["1", "x", "", "z"])
        assert record["a"] == "1"
        assert record[EXTRAS_KEY] == {"_extra_1": "x", "_extra_2": "", "_extra_3": "z"}

    def test_no_extras_when_row_matches_header(self):
        assert EXTRAS_KEY not in build_record(["a", "b"], ["1", "2"])

    def test_leaf_replaced_by_node_on_deeper_path(self):
        record = build_record(["address", "address.city"], ["flat text", "Pune"])
        assert record == {"address": {"city": "Pune"}}

    def test_node_overwritten_by_later_leaf(self):
        record = build_record(["address.city", "address"], ["Pune", "flat text"])
        assert record == {"address": "flat text"}

    def test_duplicate_key_keeps_last_value(self):
        assert build_record(["a", "a"], ["1", "2"]) == {"a": "2"}

    @given(st.lists(st.text(max_size=10), min_size=len(HEADER), max_size=len(HEADER)))
    def test_property_flatten_round_trip(self, fields):
        """Property test: flattening a built record gives back the fields"""
        record = build_record(HEADER, fields)
        assert flatten_record(HEADER, record) == fields

    @given(st.lists(st.text(max_size=10), min_size=len(HEADER) + 1, max_size=len(HEADER) + 5))
    def test_property_overflow_never_dropped(self, fields):
        """Property test: every surplus value is preserved in order"""
        record = build_record(HEADER, fields)
        assert flatten_record(HEADER, record) == fields
        assert len(record[EXTRAS_KEY]) == len(fields) - len(HEADER)


@pytest.mark.unit
class TestRecordTree:
    """Tests for lookup, upsert_path and has_content"""

    def test_lookup_leaf(self):
        assert lookup({"name": {"firstName": "Rohit"}}, "name.firstName") == Leaf("Rohit")

    def test_lookup_node(self):
        result = lookup({"address": {"city": "Pune"}}, "address")
        assert isinstance(result, Node)
        assert result.children == {"city": "Pune"}

    def test_lookup_missing(self):
        assert lookup({"name": {}}, "name.firstName") == Empty()

    def test_lookup_through_leaf_is_missing(self):
        assert lookup({"name": "Rohit"}, "name.firstName") == Empty()

    def test_upsert_creates_intermediate_nodes(self):
        tree = {}
        upsert_path(tree, ["a", "b", "c"], "v")
        assert tree == {"a": {"b": {"c": "v"}}}

    def test_has_content_nested(self):
        assert has_content({"a": "", "b": {"c": {"d": " x "}}})

    def test_has_content_all_blank(self):
        assert not has_content({"a": " ", "b": {"c": ""}, EXTRAS_KEY: {"_extra_1": ""}})

    def test_has_content_extras_only(self):
        assert has_content({"a": "", EXTRAS_KEY: {"_extra_1": "x"}})
