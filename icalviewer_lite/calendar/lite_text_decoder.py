"""TEXT value unescaping for ICS content - iCal Viewer Lite."""

_ESCAPES = {
    "n": "\n",
    ",": ",",
    ";": ";",
    "\\": "\\",
}


def decode_text(raw_value: str) -> str:
    """Resolve backslash escapes in a TEXT property value.

    The value is scanned once, left to right, so a resolved ``\\\\`` can never
    combine with the following character into another escape. Unknown
    escapes and a trailing lone backslash are kept literally.

    Examples:
        >>> decode_text("A\\\\, B\\\\; C")
        'A, B; C'
        >>> decode_text("back\\\\\\\\slash")
        'back\\\\slash'
    """
    if "\\" not in raw_value:
        return raw_value

    out: list[str] = []
    i = 0
    length = len(raw_value)

    while i < length:
        char = raw_value[i]
        if char == "\\" and i + 1 < length and raw_value[i + 1] in _ESCAPES:
            out.append(_ESCAPES[raw_value[i + 1]])
            i += 2
        else:
            out.append(char)
            i += 1

    return "".join(out)
