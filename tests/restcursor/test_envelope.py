"""Tests for response envelope parsing."""

from __future__ import annotations

import pytest

from restcursor.envelope import extract_count, extract_records, page_attributes


class TestPageAttributes:
    def test_string_count(self):
        assert page_attributes({"@attributes": {"count": "17"}}).count == 17

    def test_numeric_count(self):
        assert page_attributes({"@attributes": {"count": 4}}).count == 4

    def test_next_cursor(self):
        attrs = page_attributes({"@attributes": {"next": "https://api.test/n", "previous": ""}})
        assert attrs.next == "https://api.test/n"
        assert attrs.previous is None

    def test_blank_next_is_none(self):
        assert page_attributes({"@attributes": {"next": ""}}).next is None

    def test_missing_or_malformed(self):
        assert page_attributes({}).next is None
        assert page_attributes(None).count is None
        assert page_attributes({"@attributes": "nope"}).count is None
        assert page_attributes({"@attributes": {"count": "many"}}).count is None

    def test_extra_keys_allowed(self):
        attrs = page_attributes({"@attributes": {"count": "1", "offset": "0", "limit": "100"}})
        assert attrs.count == 1


class TestExtractRecords:
    def test_list(self):
        assert extract_records({"Items": [{"a": 1}, {"a": 2}]}, "Items") == [{"a": 1}, {"a": 2}]

    def test_single_record(self):
        assert extract_records({"Items": {"a": 1}}, "Items") == [{"a": 1}]

    def test_absent(self):
        assert extract_records({"Other": []}, "Items") == []

    def test_not_a_mapping(self):
        assert extract_records("oops", "Items") == []
        assert extract_records(None, "Items") == []

    def test_non_record_entries_skipped(self):
        assert extract_records({"Items": [{"a": 1}, "x", 3]}, "Items") == [{"a": 1}]

    def test_scalar_value(self):
        assert extract_records({"Items": "x"}, "Items") == []


class TestExtractCount:
    def test_count(self):
        assert extract_count({"@attributes": {"count": "9"}}) == 9

    def test_missing_count_is_zero(self):
        assert extract_count({"Items": []}) == 0


class TestFieldsDegradeIndependently:
    @pytest.mark.parametrize("count", ["n/a", "12.5", None, [], True])
    def test_unreadable_count_keeps_cursor(self, count):
        attrs = page_attributes(
            {"@attributes": {"count": count, "next": "https://api.test/c?p=2"}}
        )
        assert attrs.count is None
        assert attrs.next == "https://api.test/c?p=2"

    def test_non_string_cursor_keeps_count(self):
        attrs = page_attributes({"@attributes": {"count": " 8 ", "next": 42}})
        assert attrs.count == 8
        assert attrs.next is None
