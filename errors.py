# errors.py
from typing import Any, Optional


class StudentRecordsError(Exception):
    """Base class for errors raised by the student records layer."""


class InvalidIdentifier(StudentRecordsError, ValueError):
    def __init__(self, value: Any, field: Optional[str] = None):
        self.value = value
        self.field = field
        where = f" for {field}" if field else ""
        super().__init__(f"Invalid identifier{where}: {value!r}")


class InvalidDate(StudentRecordsError, ValueError):
    def __init__(self, value: Any, field: Optional[str] = None):
        self.value = value
        self.field = field
        where = f" for {field}" if field else ""
        super().__init__(f"Invalid date{where}: {value!r}")
