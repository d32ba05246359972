"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest

from zooinspect.schemas.scenario import ZooScenario


def _mock_enclosure(enclosure_id: str, animal_name: str) -> MagicMock:
    animal = MagicMock(name=f"animal-{animal_name}")
    animal.get_name.return_value = animal_name
    enclosure = MagicMock(name=f"enclosure-{enclosure_id}")
    enclosure.get_id.return_value = enclosure_id
    enclosure.get_animal.return_value = animal
    return enclosure


@pytest.fixture
def mock_zoo():
    """Factory for a mocked zoo and recognition system.

    Each enclosure is given as (enclosure_id, animal_name, safe, sick).
    Pictures are tagged tuples so tests can check what was photographed.
    """

    def factory(zoo_id: str, enclosures: list[tuple[str, str, bool, bool]]):
        mocks = [_mock_enclosure(eid, name) for eid, name, _safe, _sick in enclosures]
        safety = {eid: safe for eid, _name, safe, _sick in enclosures}
        sickness = {name: sick for _eid, name, _safe, sick in enclosures}

        zoo = MagicMock(name=f"zoo-{zoo_id}")
        zoo.get_id.return_value = zoo_id
        zoo.get_enclosures.return_value = mocks
        zoo.capture_picture_of.side_effect = lambda subject: ("picture", subject)

        def recognize_enclosure(enclosure, picture):
            status = MagicMock()
            status.is_enclosure_safe.return_value = safety[enclosure.get_id()]
            return status

        def recognize_animal(animal, picture):
            status = MagicMock()
            status.is_animal_sick.return_value = sickness[animal.get_name()]
            return status

        recognition = MagicMock(name="recognition")
        recognition.recognize_enclosure_status.side_effect = recognize_enclosure
        recognition.recognize_animal_status.side_effect = recognize_animal
        return zoo, recognition

    return factory


@pytest.fixture
def sample_scenario() -> ZooScenario:
    """Three enclosures: sick animal, unsafe enclosure, all fine."""
    return ZooScenario(
        id="Z1",
        name="Test Zoo",
        enclosures=[
            {"id": "E1", "safe": True, "animal": {"name": "Leo", "sick": True}},
            {"id": "E2", "safe": False, "animal": {"name": "Milo", "sick": False}},
            {"id": "E3", "animal": {"name": "Nala"}},
        ],
    )


@pytest.fixture
def scenario_file(tmp_path):
    """Write a scenario YAML file and return its path."""

    def factory(content: str, name: str = "zoo.yaml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return factory
