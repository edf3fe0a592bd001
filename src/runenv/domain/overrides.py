"""Override domain models for bulk context configuration."""

import enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .environments import EXECUTION_MODES, RUNNING_ENVIRONMENTS


class OverrideKind(enum.StrEnum):
    """Which context value an override changes, and how."""

    SET_TESTING = "set_testing"
    CLEAR_TESTING = "clear_testing"
    SET_DEBUG = "set_debug"
    CLEAR_DEBUG = "clear_debug"
    RUNNING_ENVIRONMENT = "running_environment"
    EXECUTION_MODE = "execution_mode"


# Kinds that carry a name to set
_VALUED_KINDS = {
    OverrideKind.RUNNING_ENVIRONMENT: RUNNING_ENVIRONMENTS,
    OverrideKind.EXECUTION_MODE: EXECUTION_MODES,
}


class Override(BaseModel):
    """A single change to apply to a RunEnvContext."""

    model_config = ConfigDict(frozen=True)

    kind: OverrideKind = Field(description="Kind of change")
    value: str | None = Field(
        default=None,
        description="Name to set, for running environment and execution mode",
    )

    @model_validator(mode="after")
    def _validate_value(self) -> "Override":
        allowed = _VALUED_KINDS.get(self.kind)
        if allowed is None:
            if self.value is not None:
                raise ValueError(f"{self.kind} override takes no value")
        elif self.value not in allowed:
            raise ValueError(
                f"{self.kind} override needs one of {sorted(allowed)}, "
                f"got {self.value!r}"
            )
        return self
