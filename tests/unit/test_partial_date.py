"""Unit tests for PartialDate parsing and serialization."""

import pytest

from rsb.contexts.schema.exceptions import (
    DateError,
    GrammarMismatchError,
    InvalidCalendarDateError,
)
from rsb.contexts.schema.partial_date import PARTIAL_DATE_REGEX, DatePrecision, PartialDate


@pytest.mark.unit
class TestParse:
    """Tests for PartialDate.parse."""

    @pytest.mark.parametrize(
        "text, precision, parts",
        [
            ("2024", DatePrecision.YEAR, (2024, None, None)),
            ("2023-04", DatePrecision.YEAR_MONTH, (2023, 4, None)),
            ("2023-04-29", DatePrecision.FULL, (2023, 4, 29)),
            ("2024-02-29", DatePrecision.FULL, (2024, 2, 29)),
            ("1999-12-31", DatePrecision.FULL, (1999, 12, 31)),
            ("0000", DatePrecision.YEAR, (0, None, None)),
            ("0000-01", DatePrecision.YEAR_MONTH, (0, 1, None)),
            ("0000-02-29", DatePrecision.FULL, (0, 2, 29)),
        ],
    )
    def test_valid_dates(self, text, precision, parts):
        value = PartialDate.parse(text)

        assert value.precision is precision
        assert (value.year, value.month, value.day) == parts

    @pytest.mark.parametrize(
        "text",
        ["abc", "", "24", "20245", "2024-1", "2024-01-1", "2024/01/01", "2024-01-01T00:00", " 2024", "2024\n", "２０２４"],
    )
    def test_grammar_mismatch(self, text):
        with pytest.raises(GrammarMismatchError) as exc_info:
            PartialDate.parse(text)

        assert exc_info.value.text == text
        assert "YYYY, YYYY-MM, YYYY-MM-DD" in str(exc_info.value)

    def test_month_out_of_range(self):
        with pytest.raises(InvalidCalendarDateError) as exc_info:
            PartialDate.parse("2024-13")

        assert (exc_info.value.year, exc_info.value.month, exc_info.value.day) == (2024, 13, None)

    @pytest.mark.parametrize(
        "text",
        ["2023-02-29", "1900-02-29", "2024-02-31", "2024-04-31", "2024-00", "2024-00-10", "2024-01-00", "2024-01-32"],
    )
    def test_invalid_calendar_dates(self, text):
        with pytest.raises(InvalidCalendarDateError):
            PartialDate.parse(text)

    def test_invalid_calendar_date_attributes(self):
        with pytest.raises(InvalidCalendarDateError) as exc_info:
            PartialDate.parse("2023-02-31")

        error = exc_info.value
        assert (error.year, error.month, error.day) == (2023, 2, 31)
        assert "2023/2/31" in str(error)

    def test_date_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            PartialDate.parse("abc")
        assert issubclass(GrammarMismatchError, DateError)
        assert issubclass(InvalidCalendarDateError, DateError)

    def test_non_string_input(self):
        with pytest.raises(GrammarMismatchError):
            PartialDate.parse(2024)


@pytest.mark.unit
class TestSerialize:
    """Tests for PartialDate.serialize."""

    def test_year(self):
        assert PartialDate.parse("2024").serialize() == "2024"

    def test_components_are_zero_padded(self):
        assert PartialDate.parse("2023-04").serialize() == "2023-04"
        assert PartialDate.parse("2023-04-09").serialize() == "2023-04-09"
        assert str(PartialDate.parse("0999-01-02")) == "0999-01-02"

    @pytest.mark.parametrize("text", ["2024", "2023-04", "2023-04-29", "2000-01-01", "0000-01-01"])
    def test_roundtrip(self, text):
        value = PartialDate.parse(text)

        assert PartialDate.parse(value.serialize()) == value
        assert value.serialize() == text


@pytest.mark.unit
class TestConstruction:
    """Direct construction applies the same checks as parsing."""

    def test_direct_construction_validates(self):
        with pytest.raises(InvalidCalendarDateError):
            PartialDate(2023, 2, 30)

    def test_day_without_month_rejected(self):
        with pytest.raises(InvalidCalendarDateError) as exc_info:
            PartialDate(2023, None, 5)

        assert (exc_info.value.month, exc_info.value.day) == (None, 5)

    @pytest.mark.parametrize("parts", [(2024, 0), (2024, 1, 0), (-1,), (10000,)])
    def test_out_of_range_components_rejected(self, parts):
        with pytest.raises(InvalidCalendarDateError):
            PartialDate(*parts)

    def test_immutable(self):
        value = PartialDate.parse("2023-04-29")

        with pytest.raises(AttributeError):
            value.year = 2000

    def test_equality_and_hash(self):
        assert PartialDate.parse("2023-04") == PartialDate(2023, 4)
        assert PartialDate.parse("2023-04") != PartialDate.parse("2023")
        assert len({PartialDate.parse("2023"), PartialDate(2023)}) == 1


@pytest.mark.unit
def test_regex_is_compiled_once():
    assert PARTIAL_DATE_REGEX.fullmatch("2024-01-01") is not None
    assert PARTIAL_DATE_REGEX.fullmatch("2024-01-01-01") is None
