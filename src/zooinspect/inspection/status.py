"""Status line vocabulary for zoo inspections.

A status line records the outcome of one check as three ``#``-delimited
fields::

    ENCLOSURE#<enclosureId>#WARNING
    ANIMAL#<animalName>#WARNING
    ZOO#<zooId>#WARNING   |   ZOO#<zooId>#OK

Subjects are written verbatim; a ``#`` inside an id or name is not escaped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

SEPARATOR = "#"


class SubjectKind(str, Enum):
    """What a status line is about."""

    ZOO = "ZOO"
    ENCLOSURE = "ENCLOSURE"
    ANIMAL = "ANIMAL"


class Verdict(str, Enum):
    """Outcome recorded on a status line."""

    WARNING = "WARNING"
    OK = "OK"


@dataclass(frozen=True)
class StatusLine:
    """A parsed status line."""

    kind: SubjectKind
    subject: str
    verdict: Verdict

    def render(self) -> str:
        return format_status_line(self.kind, self.subject, self.verdict)


def format_status_line(kind: SubjectKind, subject: Any, verdict: Verdict) -> str:
    """Render one status line. Ids are rendered with ``str()``."""
    return SEPARATOR.join((kind.value, str(subject), verdict.value))


def enclosure_warning(enclosure_id: Any) -> str:
    return format_status_line(SubjectKind.ENCLOSURE, enclosure_id, Verdict.WARNING)


def animal_warning(animal_name: str) -> str:
    return format_status_line(SubjectKind.ANIMAL, animal_name, Verdict.WARNING)


def zoo_status(zoo_id: Any, warning: bool) -> str:
    verdict = Verdict.WARNING if warning else Verdict.OK
    return format_status_line(SubjectKind.ZOO, zoo_id, verdict)


def parse_status_line(line: str) -> StatusLine:
    """Parse a status line back into its parts.

    The kind is taken up to the first ``#`` and the verdict after the last
    one, so subjects containing ``#`` survive.

    Raises:
        ValueError: If the line has fewer than two separators, or an
            unknown kind or verdict.
    """
    kind_text, sep, rest = line.partition(SEPARATOR)
    subject, sep2, verdict_text = rest.rpartition(SEPARATOR)
    if not sep or not sep2:
        raise ValueError(f"Malformed status line: {line!r}")

    try:
        kind = SubjectKind(kind_text)
    except ValueError as e:
        raise ValueError(f"Unknown status subject kind {kind_text!r} in {line!r}") from e

    try:
        verdict = Verdict(verdict_text)
    except ValueError as e:
        raise ValueError(f"Unknown status verdict {verdict_text!r} in {line!r}") from e

    return StatusLine(kind=kind, subject=subject, verdict=verdict)


__all__ = [
    "SEPARATOR",
    "StatusLine",
    "SubjectKind",
    "Verdict",
    "animal_warning",
    "enclosure_warning",
    "format_status_line",
    "parse_status_line",
    "zoo_status",
]
