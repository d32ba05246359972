"""zooinspect Configuration.

Priority:
1. Environment variables (highest priority)
2. .env file values
3. Default values in this file
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root: src/zooinspect/core/settings.py -> src/zooinspect/core/ -> src/zooinspect/ -> src/ -> project_root/
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"


class EnvSettings(BaseSettings):
    """Environment-based configuration loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file_enabled: bool = False
    log_file_path: str = "logs/zooinspect.log"
    log_file_max_size_mb: int = 10
    log_file_backup_count: int = 5

    # =========================================================================
    # Inspection
    # =========================================================================
    scenarios_dir: str = "config/zoos"
    default_scenario: str = "sample_zoo.yaml"
    inspection_log_name: str = "zooinspect.inspection_log"


# =============================================================================
# Global Settings Instance
# =============================================================================

settings = EnvSettings()


# =============================================================================
# Path Helper Functions
# =============================================================================

def get_path(name: str) -> Path:
    """Get absolute path for a configured location.

    Args:
        name: Path name (logs, scenarios)

    Returns:
        Absolute path
    """
    paths_map = {
        "logs": settings.log_file_path,
        "scenarios": settings.scenarios_dir,
    }
    rel_path = paths_map.get(name)
    if rel_path is None:
        raise ValueError(f"Unknown path: {name}")
    path = Path(rel_path)
    if path.is_absolute():
        return path
    return PROJECT_ROOT / path


def resolve_scenario_path(name_or_path: str | Path | None = None) -> Path:
    """Resolve a scenario argument to a file path.

    An existing path is returned as is; anything else is looked up by name
    under the scenarios directory. ``None`` selects the default scenario.
    """
    if name_or_path is None:
        name_or_path = settings.default_scenario
    path = Path(name_or_path)
    if path.exists():
        return path
    return get_path("scenarios") / path


__all__ = [
    "EnvSettings",
    "settings",
    "PROJECT_ROOT",
    "ENV_FILE_PATH",
    "get_path",
    "resolve_scenario_path",
]
