"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from salesbook.domain.exceptions import ValidationError

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_iso_date(value: str, field_name: str) -> str:
    """Return *value* if it is a real calendar date written as YYYY-MM-DD.

    Dates are compared as strings throughout the system, so the zero-padded
    form is mandatory.
    """
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        raise ValidationError(f"{field_name} must be YYYY-MM-DD, got {value!r}")
    try:
        date.fromisoformat(value)
    except ValueError as exc:
        raise ValidationError(f"{field_name} is not a valid date: {value!r}") from exc
    return value


@dataclass(frozen=True)
class MonthRange:
    """Half-open ``[start, end)`` range of ISO dates covering one month.

    ``end`` is the first day of the following month, rolling over into
    January of the next year after December.
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if not isinstance(self.month, int) or not 1 <= self.month <= 12:
            raise ValidationError(f"Month must be between 1 and 12, got {self.month!r}")
        if not isinstance(self.year, int) or not 1 <= self.year <= 9998:
            raise ValidationError(f"Year must be between 1 and 9998, got {self.year!r}")

    @property
    def start(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-01"

    @property
    def end(self) -> str:
        return self.next().start

    def next(self) -> MonthRange:
        if self.month == 12:
            return MonthRange(self.year + 1, 1)
        return MonthRange(self.year, self.month + 1)

    def __contains__(self, iso_date: str) -> bool:
        return self.start <= iso_date < self.end

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(year: int | str, month: int | str) -> MonthRange:
        """Convenient factory that coerces string input to int safely."""
        try:
            return MonthRange(int(year), int(month))
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid year/month: {year!r}/{month!r}") from exc
