"""Simulated zoo collaborators built from a ZooScenario.

These stand in for the zoo, its cameras and dispatchers, and the image
recognition service when running inspections from the CLI or tests. The
simulated zoo performs nothing; it records every request in call order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from zooinspect.inspection.status import SubjectKind
from zooinspect.schemas.scenario import ZooScenario

logger = logging.getLogger(__name__)


class ActionKind(str, Enum):
    CAPTURE = "capture"
    CLOSE = "close"
    SECURITY = "security"
    MAINTENANCE = "maintenance"
    VETERINARY = "veterinary"


@dataclass(frozen=True)
class ZooAction:
    """One request made to the simulated zoo."""
    kind: ActionKind
    target: str

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "target": self.target}


@dataclass(frozen=True)
class Picture:
    """Placeholder capture: remembers only what was photographed."""
    kind: SubjectKind
    subject: str


@dataclass
class SimulatedAnimal:
    name: str

    def get_name(self) -> str:
        return self.name


@dataclass
class SimulatedEnclosure:
    id: str
    animal: SimulatedAnimal

    def get_id(self) -> str:
        return self.id

    def get_animal(self) -> SimulatedAnimal:
        return self.animal


@dataclass
class SimulatedZoo:
    """In-memory zoo that records requested actions."""

    id: str
    enclosures: list[SimulatedEnclosure] = field(default_factory=list)
    actions: list[ZooAction] = field(default_factory=list)

    def get_id(self) -> str:
        return self.id

    def get_enclosures(self) -> list[SimulatedEnclosure]:
        return list(self.enclosures)

    def capture_picture_of(self, subject: SimulatedEnclosure | SimulatedAnimal) -> Picture:
        if isinstance(subject, SimulatedEnclosure):
            picture = Picture(SubjectKind.ENCLOSURE, subject.id)
        elif isinstance(subject, SimulatedAnimal):
            picture = Picture(SubjectKind.ANIMAL, subject.name)
        else:
            raise TypeError(f"Cannot photograph {type(subject).__name__}")
        self._record(ActionKind.CAPTURE, picture.subject)
        return picture

    def close_enclosure(self, enclosure: SimulatedEnclosure) -> None:
        self._record(ActionKind.CLOSE, enclosure.id)

    def request_security_to(self, enclosure: SimulatedEnclosure) -> None:
        self._record(ActionKind.SECURITY, enclosure.id)

    def request_maintenance_crew_to(self, enclosure: SimulatedEnclosure) -> None:
        self._record(ActionKind.MAINTENANCE, enclosure.id)

    def request_veterinary_to(self, animal: SimulatedAnimal) -> None:
        self._record(ActionKind.VETERINARY, animal.name)

    def actions_of(self, kind: ActionKind) -> list[str]:
        """Targets of every recorded action of one kind, in call order."""
        return [a.target for a in self.actions if a.kind == kind]

    @property
    def dispatches(self) -> list[ZooAction]:
        """Recorded actions other than picture captures."""
        return [a for a in self.actions if a.kind != ActionKind.CAPTURE]

    def _record(self, kind: ActionKind, target: str) -> None:
        logger.debug(f"Zoo {self.id}: {kind.value} -> {target}")
        self.actions.append(ZooAction(kind, target))


@dataclass(frozen=True)
class EnclosureVerdict:
    safe: bool

    def is_enclosure_safe(self) -> bool:
        return self.safe


@dataclass(frozen=True)
class AnimalVerdict:
    sick: bool

    def is_animal_sick(self) -> bool:
        return self.sick


class ScriptedRecognitionSystem:
    """Image recognition that answers from scripted verdicts.

    Enclosures are looked up by id and animals by name. Unknown subjects
    raise KeyError, as does a picture taken of something else.
    """

    def __init__(
        self,
        enclosure_safety: dict[str, bool],
        animal_sickness: dict[str, bool],
    ) -> None:
        self.enclosure_safety = dict(enclosure_safety)
        self.animal_sickness = dict(animal_sickness)

    def recognize_enclosure_status(
        self, enclosure: SimulatedEnclosure, picture: Picture
    ) -> EnclosureVerdict:
        self._check_picture(picture, SubjectKind.ENCLOSURE, enclosure.get_id())
        try:
            safe = self.enclosure_safety[enclosure.get_id()]
        except KeyError:
            raise KeyError(f"No scripted verdict for enclosure {enclosure.get_id()}") from None
        return EnclosureVerdict(safe)

    def recognize_animal_status(self, animal: SimulatedAnimal, picture: Picture) -> AnimalVerdict:
        self._check_picture(picture, SubjectKind.ANIMAL, animal.get_name())
        try:
            sick = self.animal_sickness[animal.get_name()]
        except KeyError:
            raise KeyError(f"No scripted verdict for animal {animal.get_name()}") from None
        return AnimalVerdict(sick)

    @staticmethod
    def _check_picture(picture: Picture, kind: SubjectKind, subject: str) -> None:
        if picture.kind != kind or picture.subject != subject:
            raise KeyError(
                f"Picture of {picture.kind.value} {picture.subject} "
                f"does not show {kind.value} {subject}"
            )


def build_simulation(scenario: ZooScenario) -> tuple[SimulatedZoo, ScriptedRecognitionSystem]:
    """Build a simulated zoo and its recognition system from a scenario."""
    zoo = SimulatedZoo(
        id=scenario.id,
        enclosures=[
            SimulatedEnclosure(e.id, SimulatedAnimal(e.animal.name))
            for e in scenario.enclosures
        ],
    )
    recognition = ScriptedRecognitionSystem(
        enclosure_safety={e.id: e.safe for e in scenario.enclosures},
        animal_sickness={e.animal.name: e.animal.sick for e in scenario.enclosures},
    )
    return zoo, recognition


__all__ = [
    "ActionKind",
    "AnimalVerdict",
    "EnclosureVerdict",
    "Picture",
    "ScriptedRecognitionSystem",
    "SimulatedAnimal",
    "SimulatedEnclosure",
    "SimulatedZoo",
    "ZooAction",
    "build_simulation",
]
