"""Line unfolding for ICS content - iCal Viewer Lite.

RFC 5545 wraps long content lines by inserting a line break followed by a
single space or horizontal tab. This module reverses that, producing the
logical content lines the tokenizer works on.
"""

import re
from collections.abc import Iterator

_PHYSICAL_LINE_SPLIT = re.compile(r"\r?\n")
_FOLD_CHARS = (" ", "\t")


def iter_physical_lines(ics_content: str) -> Iterator[str]:
    """Yield physical lines, treating CRLF and bare LF as the same separator."""
    yield from _PHYSICAL_LINE_SPLIT.split(ics_content)


def unfold_lines(ics_content: str) -> list[str]:
    """Reassemble folded physical lines into logical content lines.

    A continuation line has its single leading space/tab removed and the
    remainder appended directly to the previous line. A continuation with
    no preceding line is kept as a line of its own.

    Args:
        ics_content: Raw calendar document

    Returns:
        Logical lines in document order
    """
    logical_lines: list[str] = []

    for physical_line in iter_physical_lines(ics_content):
        if physical_line.startswith(_FOLD_CHARS) and logical_lines:
            logical_lines[-1] += physical_line[1:]
        else:
            logical_lines.append(physical_line)

    return logical_lines
