"""Configuration management with YAML support."""

import os
from pathlib import Path
from typing import Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from promethee.types import (
    CombinationFunction,
    ComparisonMode,
    GeneralisedCriterion,
    OperatingMode,
)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Log level (DEBUG/INFO/WARNING/ERROR)")
    format: Literal["console", "json"] = Field("console", description="Log format (console/json)")
    file: Optional[Path] = Field(None, description="Optional log file path")


class EngineConfig(BaseModel):
    """Method defaults applied to problem files that leave them unset."""

    comparison_mode: ComparisonMode = ComparisonMode.ALTERNATIVES
    generalised_criterion: Union[Literal["specified"], GeneralisedCriterion] = Field(
        "specified", description="Program-wide shape (1-6) or 'specified' per criterion"
    )
    operating_mode: OperatingMode = OperatingMode.NORMAL
    combination_function: CombinationFunction = CombinationFunction.MULTIPLICATION
    compute_discordance: bool = Field(
        False, description="Also compute discordances and preferences weakened by them"
    )

    @field_validator("generalised_criterion", mode="before")
    @classmethod
    def numeric_label(cls, v):
        if isinstance(v, str) and v.isdigit():
            return int(v)
        return v

    @field_validator("operating_mode", mode="before")
    @classmethod
    def operating_mode_label(cls, v):
        return OperatingMode.from_label(v)

    @field_validator("combination_function", mode="before")
    @classmethod
    def combination_function_label(cls, v):
        return CombinationFunction.from_label(v)

    def problem_defaults(self) -> dict:
        """Defaults in the shape of problem file fields."""
        return {
            "comparison_mode": self.comparison_mode.value,
            "generalised_criterion": (
                self.generalised_criterion
                if self.generalised_criterion == "specified"
                else int(self.generalised_criterion)
            ),
            "operating_mode": self.operating_mode.value,
            "combination_function": self.combination_function.value,
        }


class Config(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PROMETHEE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "Config":
        """Load configuration from YAML file.

        Args:
            path: Path to YAML config file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or environment.

        Priority:
        1. PROMETHEE_CONFIG_PATH environment variable
        2. ./promethee_config.yaml in current directory
        3. ~/.config/promethee/config.yaml in home directory
        4. Default configuration with environment overrides
        """
        config_path = os.getenv("PROMETHEE_CONFIG_PATH")

        if config_path and Path(config_path).exists():
            return cls.from_yaml(Path(config_path))

        default_paths = [
            Path("promethee_config.yaml"),
            Path.home() / ".config" / "promethee" / "config.yaml",
        ]

        for path in default_paths:
            if path.exists():
                return cls.from_yaml(path)

        return cls()


_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance (lazy-loaded singleton)."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def reset_config() -> None:
    """Reset global config instance (for testing)."""
    global _config
    _config = None
