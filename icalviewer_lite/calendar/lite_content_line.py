"""Content-line tokenizing for ICS content - iCal Viewer Lite.

Splits a logical ``NAME[;PARAM=value...]:VALUE`` line into its parts. Names
and parameter keys are kept exactly as written.
"""

from dataclasses import dataclass, field
from typing import Optional

BEGIN_EVENT_LINE = "BEGIN:VEVENT"
END_EVENT_LINE = "END:VEVENT"
BEGIN_CALENDAR_LINE = "BEGIN:VCALENDAR"


@dataclass(frozen=True)
class LiteContentLine:
    """One tokenized content line."""

    name: str
    raw_value: str
    params: dict[str, str] = field(default_factory=dict)


def parse_params(param_str: str) -> dict[str, str]:
    """Parse a ``;``-separated ``NAME=value`` list.

    Only the first ``=`` of each pair is significant. Pairs without a name
    before the ``=`` are ignored; repeated names keep the last value.
    """
    params: dict[str, str] = {}

    for part in param_str.split(";"):
        equals_idx = part.find("=")
        if equals_idx > 0:
            params[part[:equals_idx]] = part[equals_idx + 1:]

    return params


def tokenize_line(line: str) -> Optional[LiteContentLine]:
    """Tokenize a logical line.

    Args:
        line: Logical (already unfolded) content line

    Returns:
        LiteContentLine, or None when the line has no ``:`` after a non-empty
        property spec
    """
    colon_idx = line.find(":")
    if colon_idx <= 0:
        return None

    property_spec = line[:colon_idx]
    raw_value = line[colon_idx + 1:]

    name, sep, param_str = property_spec.partition(";")
    params = parse_params(param_str) if sep else {}

    return LiteContentLine(name=name, raw_value=raw_value, params=params)
