"""InspectionLog implementations."""

from __future__ import annotations

import logging

from zooinspect.core.settings import settings
from zooinspect.inspection.status import Verdict, parse_status_line


class RecordingInspectionLog:
    """Keeps every logged batch of status lines in memory."""

    def __init__(self) -> None:
        self.batches: list[list[str]] = []

    def log(self, lines: list[str]) -> None:
        self.batches.append(list(lines))

    @property
    def last(self) -> list[str]:
        """Lines of the most recent inspection, or an empty list."""
        return self.batches[-1] if self.batches else []


class LoggerInspectionLog:
    """Writes status lines through the logging module.

    Warning lines are logged at WARNING, everything else at INFO.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(settings.inspection_log_name)

    def log(self, lines: list[str]) -> None:
        for line in lines:
            level = logging.INFO
            if parse_status_line(line).verdict == Verdict.WARNING:
                level = logging.WARNING
            self.logger.log(level, line)


class MultiInspectionLog:
    """Fans one batch of lines out to several inspection logs, in order."""

    def __init__(self, *logs) -> None:
        self.logs = list(logs)

    def log(self, lines: list[str]) -> None:
        for inspection_log in self.logs:
            inspection_log.log(lines)


__all__ = [
    "LoggerInspectionLog",
    "MultiInspectionLog",
    "RecordingInspectionLog",
]
