"""
Rules file schema using Pydantic for validation.

Example rules file:

    defaults: true
    redact_value: "[REDACTED]"
    rules:
      - pattern: "^AWS_PROFILE$"
        action: keep
      - pattern: "_CERT$"
        action: redact
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import DEFAULT_REDACT_VALUE
from ..rules import Action


class RuleEntry(BaseModel):
    """One (pattern, action) pair; the pattern is compiled later, by the builder."""

    pattern: str = Field(..., min_length=1, description="Case-insensitive regex")
    action: Action = Field(..., description="keep, redact or unset")

    @field_validator("action", mode="before")
    @classmethod
    def parse_action(cls, v: Any) -> Any:
        """Accept action names in any case."""
        if isinstance(v, str):
            return Action.from_name(v)
        return v

    model_config = ConfigDict(extra="forbid", frozen=True)


class SaferenvConfig(BaseModel):
    """Complete rules file schema."""

    defaults: bool = Field(default=True, description="Enable built-in patterns")
    redact_value: str = Field(
        default=DEFAULT_REDACT_VALUE, description="Marker for redacted values"
    )
    rules: list[RuleEntry] = Field(
        default_factory=list, description="Rules in precedence order"
    )

    model_config = ConfigDict(extra="forbid")

    def patterns(self) -> list[tuple[str, Action]]:
        """Rules as (pattern, action) pairs, in file order."""
        return [(entry.pattern, entry.action) for entry in self.rules]


def validate_config(config_dict: dict[str, Any]) -> SaferenvConfig:
    """
    Validate a rules file dictionary against the schema.

    Raises:
        pydantic.ValidationError: If the data does not fit the schema
    """
    return SaferenvConfig(**config_dict)
