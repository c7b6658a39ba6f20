"""Logging-backed status reporter."""

from __future__ import annotations

import logging

status_log = logging.getLogger("seasonpy.status")


class LoggingStatusReporter:
    """Send status text and error reports to the ``seasonpy.status`` logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or status_log

    def report_status(self, text: str) -> None:
        self._log.info(text)

    def report_error(self, text: str, detail: str) -> None:
        self._log.error("%s\n%s", text, detail)
