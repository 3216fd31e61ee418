"""DateTime interpretation for DTSTART/DTEND values - iCal Viewer Lite.

Values are interpreted positionally (``YYYYMMDD[THHMMSS][Z]``); a value with
a date but no complete time part still yields a date. Time zone identifiers
(TZID) are not resolved, such values stay floating.
"""

import logging
import re
from typing import Optional

from icalviewer_lite.calendar.lite_models import (
    LiteDateTimeValue,
    LiteDateValue,
    LiteTemporalValue,
)
from icalviewer_lite.lite_exceptions import LiteMalformedTemporalValueError

logger = logging.getLogger(__name__)

DATE_VALUE_LENGTH = 8  # YYYYMMDD
DATE_TIME_VALUE_LENGTH = 15  # YYYYMMDDTHHMMSS

_NUMERIC = re.compile(r"[0-9]+")


def _component(raw_value: str, start: int, end: int, label: str) -> int:
    part = raw_value[start:end]
    if not _NUMERIC.fullmatch(part):
        raise LiteMalformedTemporalValueError(raw_value, f"{label} {part!r} is not numeric")
    return int(part)


def is_date_only(raw_value: str, params: Optional[dict[str, str]] = None) -> bool:
    """Return True when the value denotes a whole day.

    Either ``VALUE=DATE`` is given, or the value (ignoring a trailing ``Z``)
    is exactly ``YYYYMMDD``. The second rule is lenient: many producers omit
    the parameter on all-day events.
    """
    if params and params.get("VALUE") == "DATE":
        return True
    core = raw_value[:-1] if raw_value.endswith("Z") else raw_value
    return len(core) == DATE_VALUE_LENGTH


class LiteDateTimeParser:
    """Parser for DTSTART/DTEND raw values."""

    def interpret(
        self, raw_value: str, params: Optional[dict[str, str]] = None
    ) -> tuple[LiteTemporalValue, bool]:
        """Interpret a raw date or date-time value.

        Args:
            raw_value: Property value, e.g. ``20240115`` or ``20240115T093000Z``
            params: Property parameters (``VALUE=DATE`` forces date-only)

        Returns:
            Tuple of (temporal value, all-day flag)

        Raises:
            LiteMalformedTemporalValueError: If the value is too short or a
                component is not numeric
        """
        if len(raw_value) < DATE_VALUE_LENGTH:
            raise LiteMalformedTemporalValueError(
                raw_value, f"expected at least {DATE_VALUE_LENGTH} characters"
            )

        year = _component(raw_value, 0, 4, "year")
        month = _component(raw_value, 4, 6, "month")
        day = _component(raw_value, 6, 8, "day")

        if is_date_only(raw_value, params):
            return LiteDateValue(year=year, month=month, day=day), True

        if len(raw_value) < DATE_TIME_VALUE_LENGTH:
            # No time component available
            logger.debug("Date-time value %r has no time part, using date only", raw_value)
            return LiteDateValue(year=year, month=month, day=day), False

        return (
            LiteDateTimeValue(
                year=year,
                month=month,
                day=day,
                hour=_component(raw_value, 9, 11, "hour"),
                minute=_component(raw_value, 11, 13, "minute"),
                second=_component(raw_value, 13, 15, "second"),
                is_utc=raw_value.endswith("Z"),
            ),
            False,
        )
