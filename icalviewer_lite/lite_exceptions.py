"""Custom exception hierarchy for ICS parsing errors.

The parser degrades instead of aborting, so most of these never reach a
caller: they are raised by a component and absorbed one level up, where the
offending property or event is dropped and a warning is recorded.
"""


class LiteICSError(Exception):
    """Base exception for all icalviewer_lite errors."""


class LiteMalformedTemporalValueError(LiteICSError, ValueError):
    """A DTSTART/DTEND value could not be interpreted.

    Raised when:
    - The raw value is shorter than 8 characters
    - A year, month, day, hour, minute or second component is not numeric

    The event assembler catches this and treats the property as absent.
    """

    def __init__(self, raw_value: str, reason: str) -> None:
        self.raw_value = raw_value
        self.reason = reason
        super().__init__(f"Malformed date/time value {raw_value!r}: {reason}")


class LiteICSValidationError(LiteICSError):
    """Document does not look like an iCalendar file.

    Only raised by ``LiteICSParser.require_calendar()``; the regular parse path
    reports the same condition through ``looks_like_calendar``.
    """


class LiteConfigError(LiteICSError):
    """Configuration file exists but cannot be used."""
