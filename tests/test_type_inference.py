"""
Tests for raw cell values and type inference.
"""
import pytest

from lib.type_inference import has_currency_symbol, infer_type, looks_like_date
from lib.types import InferredType, RawValue, ValueKind


class TestRawValueFromApi:
    """Tests for building the tagged value from an ExtendedValue."""

    def test_number(self):
        raw = RawValue.from_api({"numberValue": 42.5})
        assert raw.kind is ValueKind.NUMBER
        assert raw.value == 42.5

    def test_integral_float_becomes_int(self):
        raw = RawValue.from_api({"numberValue": 5.0})
        assert raw.value == 5
        assert isinstance(raw.value, int)

    def test_string(self):
        assert RawValue.from_api({"stringValue": "hi"}) == RawValue.string("hi")

    def test_boolean(self):
        assert RawValue.from_api({"boolValue": False}) == RawValue.boolean(False)

    def test_error_value_is_absent(self):
        assert RawValue.from_api({"errorValue": {"type": "DIVIDE_BY_ZERO"}}) is None

    @pytest.mark.parametrize("payload", [None, "42", [], {}, {"numberValue": "x"}, {"numberValue": float("nan")}])
    def test_unreadable_payloads_are_absent(self, payload):
        assert RawValue.from_api(payload) is None


class TestRawValueText:
    """Tests for the string form used in the formatted-value comparison."""

    def test_int(self):
        assert RawValue.number(5).as_text() == "5"

    def test_float(self):
        assert RawValue.number(0.25).as_text() == "0.25"

    def test_boolean(self):
        assert RawValue.boolean(True).as_text() == "true"

    def test_empty_string_is_empty(self):
        assert RawValue.string("").is_empty
        assert not RawValue.number(0).is_empty
        assert not RawValue.boolean(False).is_empty


class TestInferType:
    """Tests for the priority-ordered inference table."""

    @pytest.mark.parametrize(
        "raw, formatted, expected",
        [
            (RawValue.number(42), "42%", InferredType.PERCENTAGE),
            (RawValue.number(42), "$42.00", InferredType.CURRENCY),
            (RawValue.boolean(True), "TRUE", InferredType.BOOLEAN),
            (RawValue.string("2024-01-15"), "2024-01-15", InferredType.DATE),
            (RawValue.number(42), "42", InferredType.NUMBER),
            (RawValue.string("hello"), "hello", InferredType.STRING),
        ],
    )
    def test_reference_cases(self, raw, formatted, expected):
        assert infer_type(raw, formatted) is expected

    @pytest.mark.parametrize("symbol", ["$", "£", "€", "¥", "₹", "₽", "₩"])
    def test_every_currency_symbol(self, symbol):
        assert infer_type(RawValue.number(10), f"{symbol}10") is InferredType.CURRENCY

    def test_percentage_beats_currency(self):
        assert infer_type(RawValue.number(1), "$1%") is InferredType.PERCENTAGE

    def test_number_with_date_format(self):
        assert infer_type(RawValue.number(45306), "1/15/2024") is InferredType.DATE

    def test_number_with_dashed_short_year(self):
        assert infer_type(RawValue.number(45306), "15-1-24") is InferredType.DATE

    def test_number_with_date_time_format(self):
        assert infer_type(RawValue.number(45306.5), "1/15/2024 12:00:00") is InferredType.DATE

    def test_number_with_iso_format_is_not_date(self):
        # ISO form only counts for string values
        assert infer_type(RawValue.number(45306), "2024-01-15") is InferredType.NUMBER

    def test_boolean_ignores_formatting(self):
        assert infer_type(RawValue.boolean(False), "50%") is InferredType.BOOLEAN

    def test_string_with_slash_date(self):
        assert infer_type(RawValue.string("3/4/21")) is InferredType.DATE

    def test_string_starting_with_date_is_string(self):
        assert infer_type(RawValue.string("3/4/21 team sync notes")) is InferredType.STRING

    def test_string_date_time_is_date(self):
        assert infer_type(RawValue.string("2024-01-15T10:00:00Z")) is InferredType.DATE

    def test_string_with_percent_is_string(self):
        assert infer_type(RawValue.string("50%"), "50%") is InferredType.STRING

    def test_missing_formatted_value(self):
        assert infer_type(RawValue.number(3)) is InferredType.NUMBER


class TestDatePatterns:
    """Tests for the date-like matchers."""

    @pytest.mark.parametrize("text", ["1/2/24", "01/02/2024", "1-2-2024", "31-12-99"])
    def test_numeric_dates(self, text):
        assert looks_like_date(text)

    @pytest.mark.parametrize("text", ["1/2/202", "1/2/24567", "1/2-2024", "123/1/2024", "a1/2/24", "2024"])
    def test_not_dates(self, text):
        assert not looks_like_date(text)

    def test_iso_only_for_whole_values(self):
        assert not looks_like_date("2024-01-15")
        assert looks_like_date("2024-01-15", whole_value=True)
        assert looks_like_date("2024-01-15T10:00:00Z", whole_value=True)
        assert looks_like_date("2024-01-15 10:00:00.250+02:00", whole_value=True)

    @pytest.mark.parametrize("text", ["3/4/21", " 3/4/2021 ", "15-01-2024", "1/15/2024 9:30 PM"])
    def test_whole_value_dates(self, text):
        assert looks_like_date(text, whole_value=True)

    @pytest.mark.parametrize(
        "text", ["3/4/21 team sync notes", "2024-01-15 notes", "1/2/2024 and 1/3/2024", "2024-01-150"]
    )
    def test_text_starting_with_date_is_not_a_whole_date(self, text):
        assert not looks_like_date(text, whole_value=True)

    def test_currency_symbol_detection(self):
        assert has_currency_symbol("€1.000,00")
        assert not has_currency_symbol("1,000.00")
