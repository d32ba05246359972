"""Unit tests for the simulated zoo collaborators."""

import pytest

from zooinspect.inspection import RecordingInspectionLog, ZooInspector
from zooinspect.inspection.simulated import (
    ActionKind,
    Picture,
    ScriptedRecognitionSystem,
    SimulatedAnimal,
    SimulatedEnclosure,
    SimulatedZoo,
    ZooAction,
    build_simulation,
)
from zooinspect.inspection.status import SubjectKind
from zooinspect.schemas.scenario import ZooScenario


def _scenario(zoo_id, *enclosures):
    return ZooScenario(
        id=zoo_id,
        enclosures=[
            {"id": eid, "safe": safe, "animal": {"name": name, "sick": sick}}
            for eid, name, safe, sick in enclosures
        ],
    )


class TestSimulatedZoo:
    """Tests for SimulatedZoo action recording."""

    def test_capture_tags_picture(self):
        leo = SimulatedAnimal("Leo")
        enclosure = SimulatedEnclosure("E1", leo)
        zoo = SimulatedZoo("Z1", [enclosure])

        assert zoo.capture_picture_of(enclosure) == Picture(SubjectKind.ENCLOSURE, "E1")
        assert zoo.capture_picture_of(leo) == Picture(SubjectKind.ANIMAL, "Leo")
        assert zoo.actions_of(ActionKind.CAPTURE) == ["E1", "Leo"]
        assert zoo.dispatches == []

    def test_capture_rejects_unknown_subject(self):
        zoo = SimulatedZoo("Z1")
        with pytest.raises(TypeError):
            zoo.capture_picture_of("a rock")

    def test_get_enclosures_returns_copy(self):
        zoo = SimulatedZoo("Z1", [SimulatedEnclosure("E1", SimulatedAnimal("Leo"))])
        zoo.get_enclosures().clear()
        assert len(zoo.enclosures) == 1

    def test_action_to_dict(self):
        assert ZooAction(ActionKind.VETERINARY, "Leo").to_dict() == {
            "kind": "veterinary",
            "target": "Leo",
        }


class TestScriptedRecognitionSystem:
    """Tests for ScriptedRecognitionSystem."""

    def test_answers_from_script(self):
        leo = SimulatedAnimal("Leo")
        enclosure = SimulatedEnclosure("E1", leo)
        recognition = ScriptedRecognitionSystem({"E1": False}, {"Leo": True})

        enclosure_status = recognition.recognize_enclosure_status(
            enclosure, Picture(SubjectKind.ENCLOSURE, "E1")
        )
        animal_status = recognition.recognize_animal_status(leo, Picture(SubjectKind.ANIMAL, "Leo"))

        assert enclosure_status.is_enclosure_safe() is False
        assert animal_status.is_animal_sick() is True

    def test_unknown_enclosure_raises(self):
        recognition = ScriptedRecognitionSystem({}, {})
        enclosure = SimulatedEnclosure("E9", SimulatedAnimal("Leo"))

        with pytest.raises(KeyError, match="E9"):
            recognition.recognize_enclosure_status(enclosure, Picture(SubjectKind.ENCLOSURE, "E9"))

    def test_wrong_picture_raises(self):
        recognition = ScriptedRecognitionSystem({"E1": True}, {"Leo": False})
        leo = SimulatedAnimal("Leo")

        with pytest.raises(KeyError, match="does not show"):
            recognition.recognize_animal_status(leo, Picture(SubjectKind.ENCLOSURE, "E1"))


class TestSimulatedInspection:
    """End-to-end inspections over simulated collaborators."""

    def test_sick_animal(self):
        zoo, recognition = build_simulation(_scenario("Z1", ("E1", "Leo", True, True)))
        inspection_log = RecordingInspectionLog()

        ZooInspector(recognition, inspection_log).inspect(zoo)

        assert inspection_log.last == ["ANIMAL#Leo#WARNING", "ZOO#Z1#WARNING"]
        assert zoo.dispatches == [
            ZooAction(ActionKind.CLOSE, "E1"),
            ZooAction(ActionKind.VETERINARY, "Leo"),
        ]

    def test_empty_zoo(self):
        zoo, recognition = build_simulation(_scenario("Z2"))
        inspection_log = RecordingInspectionLog()

        ZooInspector(recognition, inspection_log).inspect(zoo)

        assert inspection_log.last == ["ZOO#Z2#OK"]
        assert zoo.actions == []

    def test_unsafe_enclosure_and_sick_animal(self):
        zoo, recognition = build_simulation(_scenario("Z3", ("E1", "Milo", False, True)))
        inspection_log = RecordingInspectionLog()

        ZooInspector(recognition, inspection_log).inspect(zoo)

        assert inspection_log.last == [
            "ENCLOSURE#E1#WARNING",
            "ANIMAL#Milo#WARNING",
            "ZOO#Z3#WARNING",
        ]
        assert zoo.actions == [
            ZooAction(ActionKind.CAPTURE, "E1"),
            ZooAction(ActionKind.CLOSE, "E1"),
            ZooAction(ActionKind.SECURITY, "E1"),
            ZooAction(ActionKind.MAINTENANCE, "E1"),
            ZooAction(ActionKind.CAPTURE, "Milo"),
            ZooAction(ActionKind.CLOSE, "E1"),
            ZooAction(ActionKind.VETERINARY, "Milo"),
        ]

    def test_sample_scenario(self, sample_scenario):
        zoo, recognition = build_simulation(sample_scenario)
        inspection_log = RecordingInspectionLog()

        ZooInspector(recognition, inspection_log).inspect(zoo)

        assert inspection_log.last == [
            "ANIMAL#Leo#WARNING",
            "ENCLOSURE#E2#WARNING",
            "ZOO#Z1#WARNING",
        ]
        assert zoo.actions_of(ActionKind.CLOSE) == ["E1", "E2"]
        assert zoo.actions_of(ActionKind.SECURITY) == ["E2"]
        assert zoo.actions_of(ActionKind.MAINTENANCE) == ["E2"]
        assert zoo.actions_of(ActionKind.VETERINARY) == ["Leo"]

    def test_missing_verdict_aborts_without_logging(self):
        zoo, recognition = build_simulation(_scenario("Z4", ("E1", "Leo", True, False)))
        del recognition.animal_sickness["Leo"]
        inspection_log = RecordingInspectionLog()

        with pytest.raises(KeyError):
            ZooInspector(recognition, inspection_log).inspect(zoo)

        assert inspection_log.batches == []
