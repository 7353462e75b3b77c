"""Search table scanning and fixed-width row slicing."""

from horizons.records import BodySearchRecord
from horizons.search import (
    ALIAS_WIDTH,
    DESIGNATION_WIDTH,
    ID_WIDTH,
    NAME_WIDTH,
    OVERFLOW_MARKER,
    SEARCH_HEADER,
    mark_overflow,
    parse_search_report,
    parse_search_row,
)

from sample_reports import MARS_SEARCH

SEPARATOR = "  -------  ---------------------------------- -----------  -------------------"


def _row(body_id, name_field, designation="", other=""):
    return (
        f"{body_id:>{ID_WIDTH}}"
        f"{name_field:<{NAME_WIDTH}}"
        f"{designation:<{DESIGNATION_WIDTH}}"
        f"{other:<{ALIAS_WIDTH}}"
    )


def _table(*rows):
    return "\n".join(["Multiple matches", "", "  " + SEARCH_HEADER, SEPARATOR, *rows, "", "trailer"])


# --------------------------------------------------------------------------- #
#  Overflow marking
# --------------------------------------------------------------------------- #

def test_overflow_full_field():
    field = "x" * NAME_WIDTH
    assert mark_overflow(field) == field + OVERFLOW_MARKER


def test_no_overflow_trailing_space():
    field = ("x" * (NAME_WIDTH - 1)) + " "
    assert mark_overflow(field) == field


def test_no_overflow_short_field():
    assert mark_overflow("  Mars") == "  Mars"


# --------------------------------------------------------------------------- #
#  Row slicing
# --------------------------------------------------------------------------- #

def test_row_fields():
    row = _row(399, "  Earth", "1990 AB", "Terra")
    assert parse_search_row(row) == BodySearchRecord(399, "Earth", "1990 AB", "Terra")


def test_row_name_at_boundary():
    long_name = "A" * (NAME_WIDTH - 2)
    record = parse_search_row(_row(90000001, "  " + long_name, "C/2021 A1"))
    assert record.name == long_name + OVERFLOW_MARKER
    assert record.designation == "C/2021 A1"


def test_row_name_with_trailing_space():
    name = "B" * (NAME_WIDTH - 3)
    record = parse_search_row(_row(5, "  " + name))
    assert record.name == name


def test_row_without_id():
    assert parse_search_row(_row("abc", "  Nothing")) is None
    assert parse_search_row("") is None


# --------------------------------------------------------------------------- #
#  Whole reports
# --------------------------------------------------------------------------- #

def test_mars_search():
    assert parse_search_report(MARS_SEARCH) == [
        BodySearchRecord(4, "Mars Barycenter", "", ""),
        BodySearchRecord(499, "Mars", "", ""),
    ]


def test_rows_before_header_ignored():
    text = _row(1, "  Ignored") + "\n" + _table(_row(2, "  Kept"))
    assert [r.id for r in parse_search_report(text)] == [2]


def test_bad_rows_skipped():
    text = _table(_row(10, "  Sun"), _row("--", "  Junk"), _row(301, "  Moon", "", "Luna"))
    assert parse_search_report(text) == [
        BodySearchRecord(10, "Sun"),
        BodySearchRecord(301, "Moon", "", "Luna"),
    ]


def test_stops_at_blank_line():
    text = _table(_row(1, "  First")) + "\n" + _row(2, "  After blank")
    assert [r.id for r in parse_search_report(text)] == [1]


def test_no_header():
    assert parse_search_report("No matches found.") == []
    assert parse_search_report("") == []


def test_idempotent():
    assert parse_search_report(MARS_SEARCH) == parse_search_report(MARS_SEARCH)
