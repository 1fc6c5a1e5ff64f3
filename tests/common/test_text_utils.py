"""Tests for catalog/common/text_utils.py"""

from catalog.common.text_utils import (
    coerce_price,
    field_text,
    format_price,
    is_web_url,
    parse_leading_float,
    parse_leading_int,
)


class TestCoercePrice:
    def test_number(self):
        assert coerce_price(9.99) == 9.99

    def test_numeric_string(self):
        assert coerce_price(" 12.5 ") == 12.5

    def test_unparsable_is_zero(self):
        assert coerce_price("abc") == 0

    def test_none_is_zero(self):
        assert coerce_price(None) == 0

    def test_non_finite_is_zero(self):
        assert coerce_price("nan") == 0
        assert coerce_price("inf") == 0

    def test_bool_is_zero(self):
        assert coerce_price(True) == 0


class TestParseLeadingInt:
    def test_plain_integer(self):
        assert parse_leading_int("5") == 5

    def test_integer_prefix(self):
        assert parse_leading_int("12abc") == 12
        assert parse_leading_int("3.7") == 3

    def test_no_digits(self):
        assert parse_leading_int("abc") is None
        assert parse_leading_int("") is None


class TestParseLeadingFloat:
    def test_plain_number(self):
        assert parse_leading_float(" 12.5 ") == 12.5

    def test_trailing_text(self):
        assert parse_leading_float("9.99 GBP") == 9.99

    def test_leading_dot_and_exponent(self):
        assert parse_leading_float(".5") == 0.5
        assert parse_leading_float("2e3kg") == 2000.0

    def test_no_number_is_zero(self):
        assert parse_leading_float("abc") == 0
        assert parse_leading_float("") == 0
        assert parse_leading_float(None) == 0

    def test_overflow_is_zero(self):
        assert parse_leading_float("1e999") == 0


class TestFormatPrice:
    def test_pounds_with_two_decimals(self):
        assert format_price(12.5) == "£12.50"

    def test_thousands_separator(self):
        assert format_price(1234.5) == "£1,234.50"

    def test_missing_price(self):
        assert format_price(None) == "£0.00"


class TestIsWebUrl:
    def test_https(self):
        assert is_web_url("https://example.com/a.jpg")

    def test_http(self):
        assert is_web_url("http://example.com")

    def test_relative_path(self):
        assert not is_web_url("images/a.jpg")

    def test_other_scheme(self):
        assert not is_web_url("ftp://example.com/a.jpg")

    def test_non_string(self):
        assert not is_web_url(None)
        assert not is_web_url(42)


class TestFieldText:
    def test_missing_and_none(self):
        assert field_text({}, "name") == ""
        assert field_text({"name": None}, "name") == ""

    def test_non_string_value(self):
        assert field_text({"name": 42}, "name") == "42"
