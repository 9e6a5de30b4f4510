"""Tests for the date/time column."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from tablesift.columns import DateTimeColumn
from tablesift.exceptions import ConfigurationError, DateTimeParseError


@pytest.fixture
def column() -> DateTimeColumn:
    return DateTimeColumn("created")


class TestDateTimeNormalize:
    def test_none_returns_default_null_value(self, column: DateTimeColumn) -> None:
        assert column.normalize(None) == ""

    def test_none_returns_configured_null_value(self) -> None:
        assert DateTimeColumn("created", null_value="n/a").normalize(None) == "n/a"

    def test_iso_string_round_trips_with_default_format(self, column: DateTimeColumn) -> None:
        assert column.normalize("2024-01-02T03:04:05+00:00") == "2024-01-02T03:04:05+00:00"

    def test_offset_is_preserved(self, column: DateTimeColumn) -> None:
        assert column.normalize("2024-01-02T03:04:05+02:00") == "2024-01-02T03:04:05+02:00"

    def test_zulu_suffix(self, column: DateTimeColumn) -> None:
        assert column.normalize("2024-06-15T00:00:00Z") == "2024-06-15T00:00:00+00:00"

    def test_date_only_string(self, column: DateTimeColumn) -> None:
        assert column.normalize("2024-06-15") == "2024-06-15T00:00:00+00:00"

    def test_datetime_value_used_as_is(self, column: DateTimeColumn) -> None:
        value = datetime(2023, 12, 31, 23, 59, 59, tzinfo=timezone(timedelta(hours=-5)))
        assert column.normalize(value) == "2023-12-31T23:59:59-05:00"

    def test_naive_datetime_is_utc(self, column: DateTimeColumn) -> None:
        assert column.normalize(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05+00:00"

    def test_date_value(self, column: DateTimeColumn) -> None:
        assert column.normalize(date(2024, 2, 29)) == "2024-02-29T00:00:00+00:00"

    def test_custom_format(self) -> None:
        column = DateTimeColumn("created", format="d/m/Y H:i")
        assert column.normalize(datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)) == "02/01/2024 03:04"

    @pytest.mark.parametrize("value", ["not a date", "2024-13-45", "", 3.5])
    def test_unparsable_value_raises(self, column: DateTimeColumn, value: object) -> None:
        with pytest.raises(DateTimeParseError):
            column.normalize(value)

    def test_parse_error_is_value_error(self, column: DateTimeColumn) -> None:
        with pytest.raises(ValueError, match="yesterday"):
            column.normalize("yesterday")


class TestDateTimeOptions:
    def test_defaults(self, column: DateTimeColumn) -> None:
        assert column.options.format == "c"
        assert column.options.null_value == ""

    def test_invalid_format_type(self) -> None:
        with pytest.raises(ConfigurationError):
            DateTimeColumn("created", format=5)

    def test_unknown_option(self) -> None:
        with pytest.raises(ConfigurationError):
            DateTimeColumn("created", nullValue="-")

    def test_transform_applies_render(self) -> None:
        column = DateTimeColumn("created", format="Y", render="<time>{}</time>")
        assert column.transform("2024-05-01T00:00:00Z", {}) == "<time>2024</time>"

    def test_transform_missing_value(self) -> None:
        column = DateTimeColumn("created", null_value="never")
        assert column.transform(None, {}) == "never"
