"""Data models for ICS calendar processing - iCal Viewer Lite version."""

from dataclasses import dataclass
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer

DEFAULT_EVENT_TITLE = "Untitled Event"


class LiteDateValue(BaseModel):
    """Date-only temporal value (all-day granularity)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["date"] = "date"
    year: int
    month: int
    day: int

    def to_canonical(self) -> str:
        """Render as ``YYYY-MM-DD``."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


class LiteDateTimeValue(BaseModel):
    """Date-time temporal value, floating or UTC."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["date-time"] = "date-time"
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    is_utc: bool = False

    def to_canonical(self) -> str:
        """Render as ``YYYY-MM-DDTHH:MM:SS`` with a ``Z`` suffix when UTC."""
        suffix = "Z" if self.is_utc else ""
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}{suffix}"
        )


LiteTemporalValue = Union[LiteDateValue, LiteDateTimeValue]


@dataclass
class LiteEventDraft:
    """Mutable accumulator for one ``BEGIN:VEVENT ... END:VEVENT`` block."""

    title: str = DEFAULT_EVENT_TITLE
    start: Optional[LiteTemporalValue] = None
    end: Optional[LiteTemporalValue] = None
    all_day: bool = False
    description: str = ""
    location: str = ""

    def to_record(self) -> "LiteEventRecord":
        """Promote the draft, closing the interval when no end was given.

        Raises:
            ValueError: If the draft has no start
        """
        if self.start is None:
            raise ValueError("Cannot emit an event without a start")

        return LiteEventRecord(
            title=self.title,
            start=self.start,
            end=self.end if self.end is not None else self.start,
            all_day=self.all_day,
            description=self.description,
            location=self.location,
        )


class LiteEventRecord(BaseModel):
    """Finished event handed to the rendering layer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = DEFAULT_EVENT_TITLE
    start: Optional[LiteTemporalValue] = None
    end: Optional[LiteTemporalValue] = None
    all_day: bool = Field(default=False, alias="allDay")
    description: str = ""
    location: str = ""

    @field_serializer("start", "end")
    def serialize_temporal(self, value: Optional[LiteTemporalValue]) -> Optional[str]:
        """Serialize temporal values to their canonical ISO text."""
        return value.to_canonical() if value is not None else None

    def to_output(self) -> dict[str, Any]:
        """Return the ``{title, start, end, allDay, description, location}`` mapping."""
        return self.model_dump(by_alias=True)


class LiteICSParseResult(BaseModel):
    """Result of parsing one calendar document."""

    looks_like_calendar: bool
    events: list[LiteEventRecord] = Field(
        default_factory=list, description="Emitted events in document order"
    )
    warnings: list[str] = Field(default_factory=list)
    source_url: Optional[str] = Field(default=None, description="Source URL for tracking")

    # Calendar-level metadata
    calendar_name: Optional[str] = None
    calendar_description: Optional[str] = None
    timezone: Optional[str] = None
    prodid: Optional[str] = None
    ics_version: Optional[str] = None

    # Parse statistics
    event_count: int = 0
    skipped_event_count: int = 0

    def to_output(self) -> list[dict[str, Any]]:
        """Render every event in the shape the rendering layer expects."""
        return [event.to_output() for event in self.events]


class LiteICSValidationResult(BaseModel):
    """Outcome of the ``BEGIN:VCALENDAR`` gate."""

    valid: bool
    error: Optional[str] = None
