"""Period JSON Encoding
---------------------

Encodes a DatePeriod as a JSON object with two string fields:

    {"StartOn": "2022-03-01", "EndBefore": "2022-03-02"}

Field names can be transformed by a naming function, e.g. camel_case
gives {"startOn": ..., "endBefore": ...}.

Decoding is strict and order-sensitive: the start field must come first,
the end field second, and nothing else may follow, not even a repeat of
either field. Both values must be
strings in yyyy-MM-dd form. The period is built through the DatePeriod
constructor, so an inverted range raises InvalidRangeError.

Examples:
  >>> dumps_period(parse_period("2022-03-01/2022-03-02"), naming=camel_case)
  '{"startOn": "2022-03-01", "endBefore": "2022-03-02"}'

  >>> loads_period('{"startOn":"2022-03-01","endBefore":"2022-03-02"}', naming=camel_case)
  DatePeriod(start_on=datetime.date(2022, 3, 1), end_before=datetime.date(2022, 3, 2))

  >>> json.loads(text, object_pairs_hook=period_pairs_hook(naming=camel_case))
  {'id': 1, 'period': DatePeriod(...), 'name': 'Hello'}
"""

import json
import logging
import re
from collections.abc import Mapping
from datetime import date
from typing import Callable, Optional

from dateperiod.dates.datehelpers import to_iso_string
from dateperiod.period.periodexceptions import PeriodDecodeError, PeriodFormatError
from dateperiod.period.periodidentity import DatePeriod
from dateperiod.period.periodnormalize import parse_iso_date

logger = logging.getLogger(__name__)

START_ON_FIELD = "StartOn"
END_BEFORE_FIELD = "EndBefore"

NamingPolicy = Callable[[str], str]


# ---- Naming policies ----

def camel_case(name: str) -> str:
    """
    Lower-case the leading character: "StartOn" -> "startOn".

    A leading run of capitals is lowered as a unit ("URLPath" -> "urlPath").
    """
    if not name or not name[0].isupper():
        return name
    match = re.match(r"[A-Z]+(?=[A-Z][a-z]|$)|[A-Z]", name)
    head = match.group(0)
    return head.lower() + name[len(head):]


def snake_case(name: str) -> str:
    """Convert a PascalCase name to snake_case: "EndBefore" -> "end_before"."""
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
    return name.lower()


def field_names(naming: Optional[NamingPolicy] = None) -> tuple[str, str]:
    """Return the (start, end) field names after applying `naming`."""
    if naming is None:
        return START_ON_FIELD, END_BEFORE_FIELD
    return naming(START_ON_FIELD), naming(END_BEFORE_FIELD)


# ---- Encoding ----

def period_to_json(period: DatePeriod, naming: Optional[NamingPolicy] = None) -> dict:
    """Return the JSON-ready dict for a period, start field first."""
    start_name, end_name = field_names(naming)
    return {
        start_name: to_iso_string(period.start_on),
        end_name: to_iso_string(period.end_before),
    }


class DatePeriodJSONEncoder(json.JSONEncoder):
    """
    JSON encoder that writes DatePeriod values as two-field objects.

    Extra keyword arguments to json.dumps reach the encoder, so:

        json.dumps(container, cls=DatePeriodJSONEncoder, naming=camel_case)
    """

    def __init__(self, *args, naming: Optional[NamingPolicy] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.naming = naming

    def default(self, o):
        if isinstance(o, DatePeriod):
            return period_to_json(o, naming=self.naming)
        return super().default(o)


def dumps_period(period: DatePeriod, naming: Optional[NamingPolicy] = None, **kwargs) -> str:
    """Serialize a period to a JSON string. kwargs are passed to json.dumps."""
    return json.dumps(period_to_json(period, naming=naming), **kwargs)


# ---- Decoding ----

class _ObjectPairs(list):
    """Raw (name, value) pairs of one JSON object, in source order."""


def _json_type_name(value) -> str:
    if isinstance(value, (dict, _ObjectPairs)):
        return "object"
    return type(value).__name__


def _read_date_field(items: list, index: int, expected_name: str) -> date:
    if index >= len(items):
        raise PeriodDecodeError(f"DatePeriod: expected property name '{expected_name}', got end of object")

    name, value = items[index]
    if name != expected_name:
        raise PeriodDecodeError(f"DatePeriod: expected property name '{expected_name}', got '{name}'")
    if value is None:
        raise PeriodDecodeError(f"DatePeriod: {expected_name} value was null")
    if not isinstance(value, str):
        raise PeriodDecodeError(
            f"DatePeriod: expected string as {expected_name} property value, got {_json_type_name(value)}"
        )

    try:
        return parse_iso_date(value)
    except PeriodFormatError as e:
        raise PeriodDecodeError(f"DatePeriod: {expected_name} value {value!r} is not a yyyy-MM-dd date") from e


def _period_from_pairs(items: list, naming: Optional[NamingPolicy]) -> DatePeriod:
    start_name, end_name = field_names(naming)
    start_on = _read_date_field(items, 0, start_name)
    end_before = _read_date_field(items, 1, end_name)

    if len(items) > 2:
        raise PeriodDecodeError(f"DatePeriod: expected end of object, got property '{items[2][0]}'")

    return DatePeriod(start_on, end_before)


def period_from_json(obj, naming: Optional[NamingPolicy] = None) -> DatePeriod:
    """
    Decode a period from a parsed JSON object.

    A dict has already lost repeated keys; use loads_period or
    period_pairs_hook on JSON text to have those rejected too.

    Args:
        obj: Mapping such as the dict from json.loads; key order matters
        naming: Optional field naming transform

    Raises:
        PeriodDecodeError: On any structural mismatch or malformed date
        InvalidRangeError: If the decoded end date precedes the start date
    """
    if isinstance(obj, _ObjectPairs):
        items = obj
    elif isinstance(obj, Mapping):
        items = list(obj.items())
    else:
        raise PeriodDecodeError(f"A DatePeriod should start with {{, got {_json_type_name(obj)}")
    return _period_from_pairs(items, naming)


def loads_period(text: str, naming: Optional[NamingPolicy] = None) -> DatePeriod:
    """
    Deserialize a period from a JSON string.

    Works on the raw key/value pairs, so a repeated field name is a
    decode failure rather than last-one-wins.

    Raises:
        PeriodDecodeError: If text is not valid JSON or not a period object
        InvalidRangeError: If the end date precedes the start date
    """
    try:
        obj = json.loads(text, object_pairs_hook=_ObjectPairs)
    except json.JSONDecodeError as e:
        logger.debug(f"Invalid JSON for DatePeriod: {e}")
        raise PeriodDecodeError(f"DatePeriod: invalid JSON: {e}") from e
    return period_from_json(obj, naming=naming)


def period_pairs_hook(naming: Optional[NamingPolicy] = None) -> Callable[[list], object]:
    """
    Build an object_pairs_hook for json.loads that decodes period objects.

    Any JSON object holding at least one period field name is decoded
    strictly (wrong order, repeated or extra fields raise
    PeriodDecodeError); other objects become plain dicts.
    """
    names = set(field_names(naming))

    def hook(pairs: list):
        if any(name in names for name, _ in pairs):
            return _period_from_pairs(pairs, naming)
        return dict(pairs)

    return hook


__all__ = [
    "START_ON_FIELD",
    "END_BEFORE_FIELD",
    "camel_case",
    "snake_case",
    "field_names",
    "period_to_json",
    "period_from_json",
    "dumps_period",
    "loads_period",
    "period_pairs_hook",
    "DatePeriodJSONEncoder",
]
