"""iCalendar to event-record parser - iCal Viewer Lite version."""

import logging
from typing import Any, Optional

from icalviewer_lite.calendar.lite_content_line import BEGIN_CALENDAR_LINE
from icalviewer_lite.calendar.lite_event_assembler import LiteEventAssembler
from icalviewer_lite.calendar.lite_line_unfolder import unfold_lines
from icalviewer_lite.calendar.lite_models import (
    DEFAULT_EVENT_TITLE,
    LiteICSParseResult,
    LiteICSValidationResult,
)
from icalviewer_lite.lite_exceptions import LiteICSValidationError

logger = logging.getLogger(__name__)

MAX_ICS_SIZE_WARNING = 10 * 1024 * 1024  # 10MB warning threshold

NOT_A_CALENDAR_ERROR = "The file does not appear to be a valid iCal file"
EMPTY_CONTENT_ERROR = "No calendar content provided"

BYTE_ORDER_MARK = "\ufeff"


def _trim(ics_content: str) -> str:
    # str.strip() keeps U+FEFF, which some producers prepend
    return ics_content.strip().lstrip(BYTE_ORDER_MARK).strip()


def looks_like_calendar(ics_content: str) -> bool:
    """Return True when the trimmed content starts with ``BEGIN:VCALENDAR``.

    A leading byte order mark is ignored.
    """
    return _trim(ics_content).startswith(BEGIN_CALENDAR_LINE)


def validate_ics_content(ics_content: Optional[str]) -> LiteICSValidationResult:
    """Run the basic iCal gate used before parsing fetched content.

    Args:
        ics_content: Response body, or None when nothing was received

    Returns:
        LiteICSValidationResult with a user-facing error when invalid
    """
    if not ics_content or not _trim(ics_content):
        return LiteICSValidationResult(valid=False, error=EMPTY_CONTENT_ERROR)

    if not looks_like_calendar(ics_content):
        return LiteICSValidationResult(valid=False, error=NOT_A_CALENDAR_ERROR)

    return LiteICSValidationResult(valid=True)


class LiteICSParser:
    """Parse calendar documents into event records."""

    def __init__(self, settings: Any = None) -> None:
        """Initialize ICS parser.

        Args:
            settings: Optional settings object; ``default_title`` and
                ``large_document_warning_bytes`` are read when present
        """
        self.settings = settings
        self.default_title = getattr(settings, "default_title", DEFAULT_EVENT_TITLE)
        self.size_warning_bytes = getattr(
            settings, "large_document_warning_bytes", MAX_ICS_SIZE_WARNING
        )
        self._assembler = LiteEventAssembler(default_title=self.default_title)

        logger.debug("Lite ICS parser initialized")

    def parse_ics_content(
        self,
        ics_content: str,
        source_url: Optional[str] = None,
    ) -> LiteICSParseResult:
        """Parse a calendar document.

        Malformed input never raises: bad properties are ignored, bad events
        are dropped, and both are reported in ``warnings``.

        Args:
            ics_content: Raw ICS file content
            source_url: Optional source URL for audit trail

        Returns:
            Parse result with events and metadata
        """
        content_size = len(ics_content.encode("utf-8"))
        if content_size >= self.size_warning_bytes:
            logger.warning(
                "Large ICS content detected: %d bytes (threshold: %d)",
                content_size,
                self.size_warning_bytes,
            )

        is_calendar = looks_like_calendar(ics_content)
        if not is_calendar:
            logger.warning("Content does not start with %s", BEGIN_CALENDAR_LINE)

        outcome = self._assembler.assemble(unfold_lines(ics_content))
        metadata = outcome.calendar_metadata

        logger.debug(
            "Parsed %d events (%d skipped, %d warnings)",
            len(outcome.events),
            outcome.skipped_event_count,
            len(outcome.warnings),
        )

        return LiteICSParseResult(
            looks_like_calendar=is_calendar,
            events=outcome.events,
            warnings=outcome.warnings,
            source_url=source_url,
            calendar_name=metadata.get("X-WR-CALNAME"),
            calendar_description=metadata.get("X-WR-CALDESC"),
            timezone=metadata.get("X-WR-TIMEZONE"),
            prodid=metadata.get("PRODID"),
            ics_version=metadata.get("VERSION"),
            event_count=len(outcome.events),
            skipped_event_count=outcome.skipped_event_count,
        )

    def require_calendar(self, ics_content: str) -> LiteICSParseResult:
        """Validate then parse, raising instead of returning an invalid result.

        Raises:
            LiteICSValidationError: If the content fails the iCal gate
        """
        validation = validate_ics_content(ics_content)
        if not validation.valid:
            raise LiteICSValidationError(validation.error)
        return self.parse_ics_content(ics_content)


def parse_ics_content(ics_content: str, source_url: Optional[str] = None) -> LiteICSParseResult:
    """Parse with default settings."""
    return LiteICSParser().parse_ics_content(ics_content, source_url=source_url)
