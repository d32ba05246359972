"""
Zoo Scenario Schema - Pydantic models for simulated zoo YAML files.

A scenario describes a zoo, its enclosures and animals, and the verdicts the
simulated image recognition system returns for each of them. Scenarios drive
the CLI and the tests; they are not a zoo database.

Example YAML:
```yaml
id: Z1
name: City Zoo
enclosures:
  - id: E1
    safe: true
    animal:
      name: Leo
      sick: true
  - id: E2
    animal:
      name: Milo
```
"""

from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator


class AnimalSpec(BaseModel):
    """Animal living in an enclosure, with its scripted health verdict."""
    name: str = Field(min_length=1, description="Animal name, used in status lines")
    sick: bool = Field(default=False, description="Whether recognition reports the animal sick")

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v):
        """Accept numeric names from YAML."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class EnclosureSpec(BaseModel):
    """Enclosure with its scripted safety verdict."""
    id: str = Field(min_length=1, description="Enclosure id, used in status lines")
    safe: bool = Field(default=True, description="Whether recognition reports the enclosure safe")
    animal: AnimalSpec = Field(description="The single animal housed in this enclosure")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        """Accept numeric ids from YAML."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class ZooScenario(BaseModel):
    """
    Complete simulated zoo loaded from YAML.

    Enclosure order in the file is the inspection order.
    """
    id: str = Field(min_length=1, description="Zoo id, used in the zoo-level status line")
    name: Optional[str] = Field(default=None, description="Human-readable zoo name")
    enclosures: List[EnclosureSpec] = Field(
        default_factory=list,
        description="Enclosures in inspection order"
    )

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        """Accept numeric ids from YAML."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("enclosures")
    @classmethod
    def validate_unique_enclosures(cls, v: List[EnclosureSpec]) -> List[EnclosureSpec]:
        """Enclosure ids and animal names must be unique within a zoo."""
        seen_ids: set[str] = set()
        seen_names: set[str] = set()
        for enclosure in v:
            if enclosure.id in seen_ids:
                raise ValueError(f"Duplicate enclosure id: {enclosure.id}")
            if enclosure.animal.name in seen_names:
                raise ValueError(f"Duplicate animal name: {enclosure.animal.name}")
            seen_ids.add(enclosure.id)
            seen_names.add(enclosure.animal.name)
        return v

    @property
    def expected_warning(self) -> bool:
        """Whether an inspection of this scenario should end in WARNING."""
        return any(not e.safe or e.animal.sick for e in self.enclosures)

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "ZooScenario":
        """
        Load a scenario from a YAML file.

        Args:
            yaml_path: Path to YAML file

        Returns:
            ZooScenario instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            ValueError: If the path is not a readable file, or YAML is invalid or doesn't match schema
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Zoo scenario not found: {yaml_path}")
        if not path.is_file():
            raise ValueError(f"Zoo scenario is not a file: {yaml_path}")

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ValueError(f"Failed to read zoo scenario {yaml_path}: {e}") from e
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse zoo scenario: {e}") from e

        if not data:
            raise ValueError(f"Empty zoo scenario: {yaml_path}")
        if not isinstance(data, dict):
            raise ValueError(f"Zoo scenario must be a mapping: {yaml_path}")

        try:
            return cls(**data)
        except ValidationError as e:
            raise ValueError(f"Invalid zoo scenario {yaml_path}: {e}") from e

    def to_yaml(self, yaml_path: Union[str, Path]) -> None:
        """
        Save scenario to a YAML file.

        Args:
            yaml_path: Path to save YAML file
        """
        path = Path(yaml_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(exclude_none=True),
                f,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
            )


def load_zoo_scenario(path: Union[str, Path]) -> ZooScenario:
    """Load and validate a zoo scenario file."""
    return ZooScenario.from_yaml(path)


EXAMPLE_SCENARIO = """
id: Z1
name: Sample Zoo
enclosures:
  - id: E1
    safe: true
    animal:
      name: Leo
      sick: true
  - id: E2
    safe: false
    animal:
      name: Milo
  - id: E3
    animal:
      name: Nala
"""
