"""
Cell type inference.

Classifies a cell from its tagged raw value and its display string.
"""
from config import CURRENCY_SYMBOLS, NUMERIC_DATE_PATTERN, STRING_DATE_PATTERN
from lib.types import InferredType, RawValue, ValueKind


def looks_like_date(text: str, whole_value: bool = False) -> bool:
    """
    Display strings count when they start with D/M/YY[YY] or D-M-YY[YY].
    With whole_value the entire text must be a date (numeric or ISO),
    optionally followed by a time of day.
    """
    if whole_value:
        return bool(STRING_DATE_PATTERN.fullmatch(text.strip()))
    return bool(NUMERIC_DATE_PATTERN.match(text))


def has_currency_symbol(text: str) -> bool:
    return any(ch in CURRENCY_SYMBOLS for ch in text)


def infer_type(raw: RawValue, formatted: str | None = None) -> InferredType:
    """
    Infer a semantic type. First match wins:

    1. boolean value                         -> boolean
    2. number value, formatted has "%"       -> percentage
       number value, formatted has currency  -> currency
       number value, formatted is date-like  -> date
       number value otherwise                -> number
    3. string value that is a date (or ISO)  -> date
    4. anything else                         -> string
    """
    fmt = formatted or ""

    if raw.kind is ValueKind.BOOLEAN:
        return InferredType.BOOLEAN

    if raw.kind is ValueKind.NUMBER:
        if "%" in fmt:
            return InferredType.PERCENTAGE
        if has_currency_symbol(fmt):
            return InferredType.CURRENCY
        if looks_like_date(fmt):
            return InferredType.DATE
        return InferredType.NUMBER

    if looks_like_date(str(raw.value), whole_value=True):
        return InferredType.DATE

    return InferredType.STRING
