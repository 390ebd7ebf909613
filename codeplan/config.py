"""
Configuration management for Codeplan
"""

import os
from dotenv import load_dotenv
import json
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, ValidationError, model_validator

from codeplan import constants
from codeplan.errors import ConfigError


class ValidationSettings(BaseModel):
    """Thresholds for prompt validation"""
    min_prompt_length: int = Field(default=constants.MIN_PROMPT_LENGTH, ge=0)
    max_prompt_length: int = Field(default=constants.MAX_PROMPT_LENGTH, ge=1)

    @model_validator(mode="after")
    def _check_bounds(self) -> "ValidationSettings":
        if self.min_prompt_length > self.max_prompt_length:
            raise ValueError("min_prompt_length must not exceed max_prompt_length")
        return self


class ScoringSettings(BaseModel):
    """Weights for complexity, priority and work-unit scoring"""
    entity_weight: float = Field(default=constants.ENTITY_COMPLEXITY_WEIGHT, ge=0)
    keyword_weight: float = Field(default=constants.KEYWORD_COMPLEXITY_WEIGHT, ge=0)
    priority_base: int = constants.DEFAULT_PRIORITY
    priority_step: int = Field(default=constants.PRIORITY_STEP, ge=0)
    base_work_units: int = Field(default=constants.BASE_WORK_UNITS, ge=0)
    work_units_per_entity: int = Field(default=constants.WORK_UNITS_PER_ENTITY, ge=0)
    work_units_per_technology: int = Field(default=constants.WORK_UNITS_PER_TECHNOLOGY, ge=0)
    work_units_per_indicator: int = Field(default=constants.WORK_UNITS_PER_INDICATOR, ge=0)


class KeywordSettings(BaseModel):
    """Optional overrides for the built-in lookup tables (None keeps the default)"""
    languages: Optional[List[str]] = None
    frameworks: Optional[List[str]] = None
    platforms: Optional[List[str]] = None
    constraint_phrases: Optional[List[str]] = None


class RuntimeSettings(BaseModel):
    """Runtime settings"""
    verbose: bool = False
    log_level: str = "WARNING"


class CodeplanConfig(BaseModel):
    """Main Codeplan configuration"""
    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)
    keywords: KeywordSettings = Field(default_factory=KeywordSettings)
    runtime: RuntimeSettings = Field(default_factory=RuntimeSettings)

    @property
    def verbose(self) -> bool:
        return self.runtime.verbose


def _read_config_file(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(f) or {}
            else:
                data = json.load(f)
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not read config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at the top level")
    return data


def load_config(config_path: Optional[Path] = None) -> CodeplanConfig:
    """
    Load configuration from YAML file or use defaults.

    Priority:
    1. Provided config_path
    2. ./codeplan.yaml
    3. ~/.codeplan/config.yaml
    4. Defaults
    """
    config_data: Dict[str, Any] = {}

    # Load environment variables from .env (if present)
    load_dotenv()

    if config_path is not None and not config_path.exists():
        raise ConfigError(f"Config file does not exist: {config_path}")

    search_paths = []
    if config_path:
        search_paths.append(config_path)

    search_paths.extend([
        Path.cwd() / constants.CONFIG_FILE_NAME,
        Path.home() / ".codeplan" / "config.yaml",
    ])

    for path in search_paths:
        if path.exists():
            config_data = _read_config_file(path)
            break

    runtime = config_data.setdefault("runtime", {})
    env_level = os.getenv(constants.LOG_LEVEL_ENV)
    if env_level and isinstance(runtime, dict):
        runtime["log_level"] = env_level.upper()

    try:
        return CodeplanConfig(**config_data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def save_config(config: CodeplanConfig, path: Optional[Path] = None) -> Path:
    """Save configuration to YAML file."""
    if path is None:
        path = Path.home() / ".codeplan" / "config.yaml"

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
    return path
