from types import SimpleNamespace

import pytest


@pytest.fixture
def simple_settings() -> SimpleNamespace:
    """Lightweight settings object for parser tests.

    Fields:
      - default_title: title for events without SUMMARY
      - large_document_warning_bytes: size threshold for the large-content warning
    """
    return SimpleNamespace(
        default_title="Untitled Event",
        large_document_warning_bytes=10 * 1024 * 1024,
    )


@pytest.fixture
def timed_event_ics() -> str:
    """Single timed event with CRLF line endings."""
    return (
        "BEGIN:VCALENDAR\r\n"
        "BEGIN:VEVENT\r\n"
        "SUMMARY:Team Sync\r\n"
        "DTSTART:20240301T100000Z\r\n"
        "DTEND:20240301T110000Z\r\n"
        "LOCATION:Room 4\r\n"
        "END:VEVENT\r\n"
        "END:VCALENDAR\r\n"
    )


@pytest.fixture
def all_day_event_ics() -> str:
    """All-day event declared with VALUE=DATE and no DTEND."""
    return """BEGIN:VCALENDAR
VERSION:2.0
PRODID:-//Test//Test//EN
BEGIN:VEVENT
SUMMARY:Holiday
DTSTART;VALUE=DATE:20240704
END:VEVENT
END:VCALENDAR
"""
