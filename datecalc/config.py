"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path
from typing import List, Literal, Optional

import pendulum
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

logger = logging.getLogger(__name__)


class DisplayConfig(BaseModel):
    """How ambiguous results are presented."""
    weekday_spelling: Literal["legacy", "standard"] = "legacy"
    quarter_scheme: Literal["legacy", "standard"] = "legacy"


class ScheduleDefaults(BaseModel):
    """Default work/off pattern for schedule generation."""
    work_days: int = 5
    off_days: int = 2

    @field_validator("work_days", "off_days")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Ensure day counts are not negative."""
        if v < 0:
            raise ValueError(f"Day counts must be zero or more, got {v}")
        return v

    @model_validator(mode="after")
    def validate_cycle(self) -> "ScheduleDefaults":
        """Ensure the pattern covers at least one day."""
        if self.work_days + self.off_days == 0:
            raise ValueError("work_days and off_days cannot both be zero")
        return self


class AppConfig(BaseModel):
    """Application configuration."""
    timezone: str = "UTC"
    weekend_days: List[int] = Field(default_factory=lambda: [5, 6])  # Saturday, Sunday
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    schedule: ScheduleDefaults = Field(default_factory=ScheduleDefaults)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Ensure the timezone is a known IANA name."""
        try:
            pendulum.timezone(value)
        except Exception as exc:
            raise ValueError(f"Unknown timezone: {value!r}") from exc
        return value

    @field_validator("weekend_days")
    @classmethod
    def validate_weekend_days(cls, value: List[int]) -> List[int]:
        """Ensure weekdays are in valid range and deduplicated."""
        invalid_days = [day for day in value if day not in range(7)]
        if invalid_days:
            raise ValueError(f"weekend_days must be between 0 and 6, got {invalid_days}")
        # Preserve order while removing duplicates
        return list(dict.fromkeys(value))

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        logger.debug("Loaded configuration from %s", config_path)
        return cls(**data)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for datecalc.yaml in current directory
    config_path = Path.cwd() / "datecalc.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "datecalc.yaml"

    return config_path


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load the configuration, falling back to defaults.

    An explicitly given path must exist. Without one, the default location is
    used when present and built-in defaults otherwise.
    """
    if config_path is not None:
        return AppConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if default_path.exists():
        return AppConfig.load_from_yaml(default_path)

    logger.info("No configuration file at %s, using defaults", default_path)
    return AppConfig()
