"""Calendar document parsing for icalviewer_lite."""

from icalviewer_lite.calendar.lite_models import (
    LiteEventRecord,
    LiteICSParseResult,
    LiteICSValidationResult,
)
from icalviewer_lite.calendar.lite_parser import (
    LiteICSParser,
    looks_like_calendar,
    parse_ics_content,
    validate_ics_content,
)

__all__ = [
    "LiteEventRecord",
    "LiteICSParseResult",
    "LiteICSParser",
    "LiteICSValidationResult",
    "looks_like_calendar",
    "parse_ics_content",
    "validate_ics_content",
]
