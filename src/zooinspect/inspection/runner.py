"""Inspection runner for a single zoo.

Walks the zoo's enclosures in order and, for each one, checks the
enclosure and then its animal. A failed check triggers remedial dispatch
through the zoo and records a warning line. After the last enclosure one
zoo-level line is appended, carrying WARNING if any check failed.

The run is strictly sequential. A collaborator exception aborts the whole
run and the lines accumulated so far are discarded with it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from zooinspect.inspection.ports import Enclosure, ImageRecognitionSystem, Zoo
from zooinspect.inspection.status import animal_warning, enclosure_warning, zoo_status

logger = logging.getLogger(__name__)


@dataclass
class InspectionResult:
    """Status lines and warning flag accumulated over one run."""

    lines: list[str] = field(default_factory=list)
    zoo_warning: bool = False
    reported: bool = False

    @property
    def warning_count(self) -> int:
        """Number of enclosure and animal warnings raised."""
        return len(self.lines) - 1 if self.reported else len(self.lines)

    def add_warning(self, line: str) -> None:
        if self.reported:
            raise RuntimeError("Inspection already reported")
        self.lines.append(line)
        self.zoo_warning = True

    def report(self, zoo_id: object) -> str:
        """Append the zoo-level line. Allowed once per run."""
        if self.reported:
            raise RuntimeError("Inspection already reported")
        line = zoo_status(zoo_id, self.zoo_warning)
        self.lines.append(line)
        self.reported = True
        return line


def check_enclosure(
    zoo: Zoo,
    image_recognition_system: ImageRecognitionSystem,
    enclosure: Enclosure,
    result: InspectionResult,
) -> None:
    """Check that an enclosure is safe; close and secure it if not."""
    picture = zoo.capture_picture_of(enclosure)
    status = image_recognition_system.recognize_enclosure_status(enclosure, picture)
    if status.is_enclosure_safe():
        logger.debug(f"Enclosure {enclosure.get_id()} is safe")
        return

    logger.debug(f"Enclosure {enclosure.get_id()} is unsafe, dispatching security and maintenance")
    zoo.close_enclosure(enclosure)
    zoo.request_security_to(enclosure)
    zoo.request_maintenance_crew_to(enclosure)
    result.add_warning(enclosure_warning(enclosure.get_id()))


def check_animal(
    zoo: Zoo,
    image_recognition_system: ImageRecognitionSystem,
    enclosure: Enclosure,
    result: InspectionResult,
) -> None:
    """Check that the enclosure's animal is healthy; close and call the vet if not."""
    animal = enclosure.get_animal()
    picture = zoo.capture_picture_of(animal)
    status = image_recognition_system.recognize_animal_status(animal, picture)
    if not status.is_animal_sick():
        logger.debug(f"Animal {animal.get_name()} is healthy")
        return

    logger.debug(f"Animal {animal.get_name()} is sick, dispatching veterinary")
    # May close an enclosure already closed by check_enclosure
    zoo.close_enclosure(enclosure)
    zoo.request_veterinary_to(animal)
    result.add_warning(animal_warning(animal.get_name()))


def run_inspection(zoo: Zoo, image_recognition_system: ImageRecognitionSystem) -> InspectionResult:
    """Inspect every enclosure of a zoo and report the zoo-level verdict.

    Args:
        zoo: Zoo to inspect
        image_recognition_system: Classifier for enclosure and animal pictures

    Returns:
        InspectionResult whose last line is the zoo-level status line.
    """
    result = InspectionResult()

    for enclosure in zoo.get_enclosures():
        check_enclosure(zoo, image_recognition_system, enclosure, result)
        check_animal(zoo, image_recognition_system, enclosure, result)

    line = result.report(zoo.get_id())
    logger.info(f"Inspection complete: {line} ({result.warning_count} warnings)")

    return result


__all__ = [
    "InspectionResult",
    "check_animal",
    "check_enclosure",
    "run_inspection",
]
