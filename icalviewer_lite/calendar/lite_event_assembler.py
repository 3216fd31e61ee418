"""VEVENT assembly from logical content lines - iCal Viewer Lite.

A two-state machine (outside / inside an event block) that feeds property
lines into an ``LiteEventDraft`` and promotes finished drafts to
``LiteEventRecord``. Property handling is table-driven: supporting another
property means adding an entry to ``DEFAULT_PROPERTY_HANDLERS`` (or passing
a custom table), the state machine itself stays untouched.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from icalviewer_lite.calendar.lite_content_line import (
    BEGIN_EVENT_LINE,
    END_EVENT_LINE,
    LiteContentLine,
    tokenize_line,
)
from icalviewer_lite.calendar.lite_datetime_utils import LiteDateTimeParser
from icalviewer_lite.calendar.lite_models import (
    DEFAULT_EVENT_TITLE,
    LiteEventDraft,
    LiteEventRecord,
)
from icalviewer_lite.calendar.lite_text_decoder import decode_text
from icalviewer_lite.lite_exceptions import LiteMalformedTemporalValueError

logger = logging.getLogger(__name__)

PropertyHandler = Callable[[LiteEventDraft, LiteContentLine], None]

# Calendar-level properties recorded while outside any event block
CALENDAR_METADATA_PROPERTIES = frozenset(
    {"X-WR-CALNAME", "X-WR-CALDESC", "X-WR-TIMEZONE", "PRODID", "VERSION"}
)

_datetime_parser = LiteDateTimeParser()


def _set_title(draft: LiteEventDraft, line: LiteContentLine) -> None:
    draft.title = decode_text(line.raw_value)


def _set_description(draft: LiteEventDraft, line: LiteContentLine) -> None:
    draft.description = decode_text(line.raw_value)


def _set_location(draft: LiteEventDraft, line: LiteContentLine) -> None:
    draft.location = decode_text(line.raw_value)


def _set_start(draft: LiteEventDraft, line: LiteContentLine) -> None:
    value, all_day = _datetime_parser.interpret(line.raw_value, line.params)
    draft.start = value
    if all_day:
        draft.all_day = True


def _set_end(draft: LiteEventDraft, line: LiteContentLine) -> None:
    # DTEND never changes the all-day flag
    value, _ = _datetime_parser.interpret(line.raw_value, line.params)
    draft.end = value


DEFAULT_PROPERTY_HANDLERS: Mapping[str, PropertyHandler] = {
    "SUMMARY": _set_title,
    "DESCRIPTION": _set_description,
    "LOCATION": _set_location,
    "DTSTART": _set_start,
    "DTEND": _set_end,
}


class AssemblerState(Enum):
    """Position of the assembler relative to VEVENT blocks."""

    OUTSIDE = "outside"
    IN_EVENT = "in_event"


@dataclass
class LiteAssemblyOutcome:
    """Everything one assembly pass produced."""

    events: list[LiteEventRecord] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    calendar_metadata: dict[str, str] = field(default_factory=dict)
    skipped_event_count: int = 0


class LiteEventAssembler:
    """Build event records from logical content lines."""

    def __init__(
        self,
        property_handlers: Optional[Mapping[str, PropertyHandler]] = None,
        default_title: str = DEFAULT_EVENT_TITLE,
    ) -> None:
        """Initialize the assembler.

        Args:
            property_handlers: Property name to handler table (defaults to
                ``DEFAULT_PROPERTY_HANDLERS``)
            default_title: Title given to events without SUMMARY
        """
        self.property_handlers = dict(
            DEFAULT_PROPERTY_HANDLERS if property_handlers is None else property_handlers
        )
        self.default_title = default_title

    def assemble(self, logical_lines: Iterable[str]) -> LiteAssemblyOutcome:
        """Run the state machine over the given lines.

        All state lives in this call, so one assembler may be shared between
        threads.

        Args:
            logical_lines: Unfolded content lines in document order

        Returns:
            LiteAssemblyOutcome with events in order of their BEGIN:VEVENT
        """
        outcome = LiteAssemblyOutcome()
        state = AssemblerState.OUTSIDE
        draft: Optional[LiteEventDraft] = None
        event_index = 0

        for raw_line in logical_lines:
            line = raw_line.strip()
            if not line:
                continue

            if line == BEGIN_EVENT_LINE:
                if state is AssemblerState.IN_EVENT:
                    self._skip(outcome, event_index, "restarted by a nested BEGIN:VEVENT")
                event_index += 1
                state = AssemblerState.IN_EVENT
                draft = LiteEventDraft(title=self.default_title)
                continue

            if state is AssemblerState.OUTSIDE or draft is None:
                self._record_calendar_metadata(outcome, line)
                continue

            if line == END_EVENT_LINE:
                state = AssemblerState.OUTSIDE
                if draft.start is None:
                    logger.debug("Event #%d has no valid DTSTART, dropping it", event_index)
                    outcome.skipped_event_count += 1
                else:
                    outcome.events.append(draft.to_record())
                draft = None
                continue

            self._apply_property(outcome, draft, line, event_index)

        if state is AssemblerState.IN_EVENT:
            self._skip(outcome, event_index, "not terminated by END:VEVENT")

        return outcome

    def _apply_property(
        self,
        outcome: LiteAssemblyOutcome,
        draft: LiteEventDraft,
        line: str,
        event_index: int,
    ) -> None:
        content_line = tokenize_line(line)
        if content_line is None:
            return

        handler = self.property_handlers.get(content_line.name)
        if handler is None:
            logger.debug("Ignoring property %s in event #%d", content_line.name, event_index)
            return

        try:
            handler(draft, content_line)
        except LiteMalformedTemporalValueError as e:
            warning = f"Event #{event_index}: ignoring {content_line.name}: {e}"
            logger.warning(warning)
            outcome.warnings.append(warning)

    def _skip(self, outcome: LiteAssemblyOutcome, event_index: int, reason: str) -> None:
        warning = f"Event #{event_index} discarded: {reason}"
        logger.warning(warning)
        outcome.warnings.append(warning)
        outcome.skipped_event_count += 1

    def _record_calendar_metadata(self, outcome: LiteAssemblyOutcome, line: str) -> None:
        content_line = tokenize_line(line)
        if content_line is not None and content_line.name in CALENDAR_METADATA_PROPERTIES:
            outcome.calendar_metadata[content_line.name] = decode_text(content_line.raw_value)
