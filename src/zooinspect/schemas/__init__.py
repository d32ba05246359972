"""Pydantic schemas for zooinspect YAML files."""

from zooinspect.schemas.scenario import (
    EXAMPLE_SCENARIO,
    AnimalSpec,
    EnclosureSpec,
    ZooScenario,
    load_zoo_scenario,
)

__all__ = [
    "AnimalSpec",
    "EnclosureSpec",
    "ZooScenario",
    "load_zoo_scenario",
    "EXAMPLE_SCENARIO",
]
