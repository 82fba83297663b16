"""
Session configuration.

A session can be seeded from a YAML document:

    logging:
      level: INFO
    globals:
      X: 0.2
    gates:
      g1:
        variables: {A: 0.5, B: 0.7}
        expression: {add: [{var: A}, {var: B}]}

Values are taken as given (no range check). Gate expressions use the JSON
Logic form read by ``LogicParser``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    ValidationError,
    field_validator,
)

from .environment import GLOBAL_SCOPE
from .errors import ConfigurationError, ExpressionFormatError
from .log import configure_logging, get_logger
from .logic.expression import Expression
from .logic.parser import LogicParser

if TYPE_CHECKING:
    from .session import FuzzySession

logger = get_logger(__name__)

# Booleans and numeric strings are not degrees
Degree = Union[StrictInt, StrictFloat]


class LoggingConfig(BaseModel):
    """Logging options applied when a configuration is loaded."""

    model_config = ConfigDict(extra="forbid")

    level: str = "WARNING"
    format: Optional[str] = None
    enabled: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{v}'")
        return level


class GateConfig(BaseModel):
    """Variables and optional expression of one gate."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    variables: Dict[str, Degree] = Field(default_factory=dict)
    expression: Optional[Expression] = None

    @field_validator("expression", mode="before")
    @classmethod
    def parse_expression(cls, v: Any) -> Optional[Expression]:
        if v is None:
            return None
        try:
            return LogicParser().parse(v)
        except ExpressionFormatError as e:
            raise ValueError(str(e)) from e


class SessionConfig(BaseModel):
    """Initial contents of a session."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    globals: Dict[str, Degree] = Field(default_factory=dict)
    gates: Dict[str, GateConfig] = Field(default_factory=dict)

    @field_validator("gates")
    @classmethod
    def validate_gate_names(cls, v: Dict[str, GateConfig]) -> Dict[str, GateConfig]:
        if "" in v:
            raise ValueError("gate names must be non-empty")
        if GLOBAL_SCOPE in v:
            raise ValueError(
                f"'{GLOBAL_SCOPE}' is reserved; put global variables under 'globals'"
            )
        return v

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SessionConfig":
        """Validate configuration data."""
        try:
            return cls.model_validate(data or {})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid session configuration: {e}") from e

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "SessionConfig":
        """Load configuration from YAML content."""
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML: {e}") from e
        if data is not None and not isinstance(data, dict):
            raise ConfigurationError("Session configuration must be a mapping")
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Path) -> "SessionConfig":
        """Load configuration from a file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                return cls.from_yaml(f.read())
        except OSError as e:
            raise ConfigurationError(f"Cannot read {path}: {e}") from e


def apply_config(session: "FuzzySession", config: SessionConfig) -> None:
    """
    Load a configuration into a session.

    Each gate's variables and expression are assigned with that gate as the
    ambient gate, the same way calling code would do it.
    """
    if config.logging.enabled:
        if config.logging.format:
            configure_logging(config.logging.level, config.logging.format)
        else:
            configure_logging(config.logging.level)

    for name, value in config.globals.items():
        session.assign_value(name, value, GLOBAL_SCOPE)

    for gate, gate_config in config.gates.items():
        with session.gate(gate):
            for name, value in gate_config.variables.items():
                session.assign_value(name, value)
            if gate_config.expression is not None:
                session.assign_expression(gate, gate_config.expression)

    logger.info(
        "Loaded configuration: %d global(s), %d gate(s)",
        len(config.globals), len(config.gates),
    )
