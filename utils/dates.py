# utils/dates.py
import re
from datetime import datetime
from typing import Any, Optional
from pydantic import TypeAdapter, ValidationError
from errors import InvalidDate

_datetime_adapter = TypeAdapter(datetime)

# pydantic reads bare numbers as unix timestamps, so require a calendar date up front
_ISO_DATE_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_datetime(value: Any, field: Optional[str] = None) -> datetime:
    # Accepts "YYYY-MM-DD" as well as full ISO-8601 timestamps (with or without offset)
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not _ISO_DATE_PREFIX.match(value.strip()):
        raise InvalidDate(value, field)
    try:
        return _datetime_adapter.validate_python(value.strip())
    except ValidationError:
        raise InvalidDate(value, field)
