"""icalviewer_lite - lightweight iCalendar event extraction.

Turns a fetched calendar document into the event records a calendar view
renders. Imports are kept light here; the parser lives in
``icalviewer_lite.calendar``.
"""

__version__ = "0.1.0"

from typing import Optional


def _init_logging(level_name: Optional[str]) -> None:
    """Initialize root logging to stream to console.

    Honors the ICALVIEWER_DEBUG environment variable (truthy values: "1",
    "true", "yes", "on"), which forces DEBUG verbosity.
    """
    import logging
    import os
    import sys

    from colorlog import ColoredFormatter

    debug_env = os.environ.get("ICALVIEWER_DEBUG", "")
    if debug_env.strip().lower() in ("1", "true", "yes", "on"):
        level_name = "DEBUG"

    root = logging.getLogger()
    # Only configure basic handler if no handlers are present to avoid duplicate output.
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stderr)
        # HH:MM:SS  LEVEL   logger.name: message
        fmt = "%(asctime)s %(log_color)s%(levelname)-7s%(reset)s %(name)s: %(message)s"
        log_colors = {
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        }
        handler.setFormatter(ColoredFormatter(fmt, datefmt="%H:%M:%S", log_colors=log_colors))
        root.addHandler(handler)

    level = logging.INFO
    if isinstance(level_name, str):
        level = getattr(logging, level_name.upper(), logging.INFO)
    root.setLevel(level)
    logging.getLogger(__name__).debug(
        "Logging initialized at level %s", logging.getLevelName(level)
    )


def run_cli(args: Optional[object] = None) -> int:
    """Validate and parse one calendar document, printing JSON to stdout.

    Args:
        args: Namespace with ``source``, ``config``, ``debug`` and ``indent``

    Returns:
        Process exit status: 0 for a valid calendar, 1 otherwise, 2 for an
        unusable configuration file
    """
    import json
    import logging
    import os
    import sys
    from pathlib import Path

    _init_logging(os.environ.get("ICALVIEWER_LOG_LEVEL"))
    logger = logging.getLogger(__name__)

    from icalviewer_lite.calendar import LiteICSParser, validate_ics_content
    from icalviewer_lite.config_loader import load_config
    from icalviewer_lite.lite_exceptions import LiteConfigError
    from icalviewer_lite.lite_logging import configure_lite_logging, get_logging_status

    source = getattr(args, "source", "-")
    debug = bool(getattr(args, "debug", False))

    try:
        cfg = load_config(getattr(args, "config", None))
    except LiteConfigError as exc:
        logger.error("Unusable configuration: %s", exc)
        return 2

    configure_lite_logging(debug_mode=debug, level_name=cfg.log_level)
    if debug:
        logger.debug("Logging status: %s", get_logging_status())

    indent = getattr(args, "indent", None)
    if indent is None:
        indent = cfg.output_indent

    response: dict = {"valid": False, "error": None, "events": []}
    try:
        if source == "-":
            content = sys.stdin.read()
        else:
            content = Path(source).read_text(encoding="utf-8-sig", errors="replace")
    except OSError as exc:
        logger.error("Failed to read %s: %s", source, exc)
        response["error"] = str(exc)
    else:
        validation = validate_ics_content(content)
        response["error"] = validation.error
        if validation.valid:
            result = LiteICSParser(cfg).parse_ics_content(
                content, source_url=None if source == "-" else source
            )
            response["valid"] = True
            response["events"] = result.to_output()
            if debug:
                response["warnings"] = result.warnings
            logger.info("Parsed %d events from %s", result.event_count, source)

    print(json.dumps(response, indent=indent or None, ensure_ascii=False))
    return 0 if response["valid"] else 1
