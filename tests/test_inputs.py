"""Tests for report_engine/services/inputs.py — CSV and metadata adaptation."""

import pytest
from datetime import datetime

from report_engine.config import Config
from report_engine.errors import MalformedTable, MetadataError
from report_engine.services.inputs import (
    default_footer_fields,
    format_generated_date,
    parse_csv,
    parse_metadata,
    resolve_header_fields,
)


GENERATED_ON = datetime(2024, 1, 5, 14, 30)


# =========================================================================
# parse_csv
# =========================================================================

class TestParseCsv:
    def test_simple(self):
        assert parse_csv(b"Name,Score\nAlice,10\n") == [["Name", "Score"], ["Alice", "10"]]

    def test_ragged_rows_kept(self):
        rows = parse_csv(b"a,b,c\n1\n1,2,3,4\n")
        assert rows == [["a", "b", "c"], ["1"], ["1", "2", "3", "4"]]

    def test_utf8_bom_stripped(self):
        rows = parse_csv("\ufeffName,City\nZoë,Köln\n".encode("utf-8"))
        assert rows[0] == ["Name", "City"]
        assert rows[1] == ["Zoë", "Köln"]

    def test_quoted_fields(self):
        rows = parse_csv(b'Name,Note\n"Doe, Jane","said ""hi""\nthen left"\n')
        assert rows[1] == ["Doe, Jane", 'said "hi"\nthen left']

    def test_blank_lines_skipped(self):
        assert parse_csv(b"A\n\n1\n\n") == [["A"], ["1"]]

    def test_text_input(self):
        assert parse_csv("A;B\n1;2", delimiter=";") == [["A", "B"], ["1", "2"]]

    def test_invalid_utf8(self):
        with pytest.raises(MalformedTable):
            parse_csv(b"\xff\xfe\xfa,broken")

    def test_header_only(self):
        assert parse_csv(b"Name,Score\n") == [["Name", "Score"]]


# =========================================================================
# parse_metadata
# =========================================================================

class TestParseMetadata:
    def test_list(self):
        assert parse_metadata('["T", "I", "R"]') == ["T", "I", "R"]

    def test_object(self):
        assert parse_metadata('{"Title": "T"}') == {"Title": "T"}

    def test_invalid_json(self):
        with pytest.raises(MetadataError, match="Invalid JSON"):
            parse_metadata("{not json")

    @pytest.mark.parametrize("raw", ['"just a string"', "42", "null"])
    def test_scalar_rejected(self, raw):
        with pytest.raises(MetadataError):
            parse_metadata(raw)


# =========================================================================
# resolve_header_fields
# =========================================================================

class TestResolveHeaderFields:
    def test_positional_list(self):
        fields = resolve_header_fields(
            ["Audit", "Jane Doe", "Jan 01 - Mar 31"],
            generated_on=GENERATED_ON,
        )
        assert fields.title == "Audit"
        assert fields.subject_name == "Jane Doe"
        assert fields.date_range == "Jan 01 - Mar 31"
        assert fields.generated_date == "Jan 05, 2024"

    def test_keyed_object(self):
        fields = resolve_header_fields(
            {"Title": "Scan", "ProductName": "Firewall X", "DateRange": "Q1"},
            generated_on=GENERATED_ON,
        )
        assert (fields.title, fields.subject_name, fields.date_range) == ("Scan", "Firewall X", "Q1")

    def test_inspector_name_key(self):
        fields = resolve_header_fields({"InspectorName": "Sam"}, generated_on=GENERATED_ON)
        assert fields.subject_name == "Sam"

    def test_product_name_wins(self):
        fields = resolve_header_fields(
            {"ProductName": "Widget", "InspectorName": "Sam"}, generated_on=GENERATED_ON
        )
        assert fields.subject_name == "Widget"

    def test_missing_values_fall_back(self):
        fields = resolve_header_fields(["Only title"], generated_on=GENERATED_ON)
        assert fields.subject_name == "N/A"
        assert fields.date_range == "N/A"

        fields = resolve_header_fields({}, generated_on=GENERATED_ON)
        assert fields.title == "N/A"

    def test_null_entries_fall_back(self):
        fields = resolve_header_fields([None, "Jane", None], generated_on=GENERATED_ON)
        assert fields.title == "N/A"
        assert fields.date_range == "N/A"

    def test_non_string_values_stringified(self):
        fields = resolve_header_fields([2024, 7, "x"], generated_on=GENERATED_ON)
        assert fields.title == "2024"
        assert fields.subject_name == "7"

    def test_defaults_from_config(self):
        fields = resolve_header_fields([], generated_on=GENERATED_ON)
        assert fields.logo_path == Config.LOGO_PATH
        assert fields.company_name == Config.COMPANY_NAME

    def test_overrides(self):
        fields = resolve_header_fields(
            [], generated_on=GENERATED_ON, logo_path="/tmp/x.png", company_name="Acme"
        )
        assert fields.logo_path == "/tmp/x.png"
        assert fields.company_name == "Acme"

    def test_rejects_other_types(self):
        with pytest.raises(MetadataError):
            resolve_header_fields("Title")


class TestFormatting:
    @pytest.mark.parametrize("moment,expected", [
        (datetime(2024, 1, 5), "Jan 05, 2024"),
        (datetime(2023, 12, 31), "Dec 31, 2023"),
    ])
    def test_generated_date(self, moment, expected):
        assert format_generated_date(moment) == expected

    def test_default_footer(self):
        footer = default_footer_fields()
        assert footer.show_page_numbers == Config.SHOW_PAGE_NUMBERS
        assert footer.right_text == Config.FOOTER_RIGHT_TEXT
