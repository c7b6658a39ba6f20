"""Port for best-effort status reporting."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StatusReporter(Protocol):
    def report_status(self, text: str) -> None: ...

    def report_error(self, text: str, detail: str) -> None: ...
