"""Collaborator protocols consumed by the inspection runner.

All calls are synchronous. None of them has an error contract beyond
"may raise", in which case the inspection run aborts.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence


class Animal(Protocol):
    """An animal living in an enclosure."""

    def get_name(self) -> str:
        ...


class Enclosure(Protocol):
    """A habitat housing exactly one animal."""

    def get_id(self) -> Any:
        ...

    def get_animal(self) -> Animal:
        ...


class Zoo(Protocol):
    """The zoo being inspected, and the dispatcher for remedial actions."""

    def get_id(self) -> Any:
        ...

    def get_enclosures(self) -> Sequence[Enclosure]:
        """Enclosures in inspection order."""
        ...

    def capture_picture_of(self, subject: Enclosure | Animal) -> Any:
        """Capture a picture of an enclosure or an animal.

        The picture is opaque and only handed to the recognition system.
        """
        ...

    def close_enclosure(self, enclosure: Enclosure) -> None:
        ...

    def request_security_to(self, enclosure: Enclosure) -> None:
        ...

    def request_maintenance_crew_to(self, enclosure: Enclosure) -> None:
        ...

    def request_veterinary_to(self, animal: Animal) -> None:
        ...


class EnclosureStatus(Protocol):
    def is_enclosure_safe(self) -> bool:
        ...


class AnimalStatus(Protocol):
    def is_animal_sick(self) -> bool:
        ...


class ImageRecognitionSystem(Protocol):
    """Classifies pictures of enclosures and animals."""

    def recognize_enclosure_status(self, enclosure: Enclosure, picture: Any) -> EnclosureStatus:
        ...

    def recognize_animal_status(self, animal: Animal, picture: Any) -> AnimalStatus:
        ...


class InspectionLog(Protocol):
    """Receives the status lines of one finished inspection."""

    def log(self, lines: list[str]) -> None:
        """Record the ordered status lines of one run.

        Args:
            lines: Status lines, zoo-level line last
        """
        ...
