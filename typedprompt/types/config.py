"""typedprompt.types.config

Contains the `PromptConfig` model, the per-call configuration of
a prompt."""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ("PromptConfig",)


class PromptConfig(BaseModel):
    """Configuration for a single call to `prompt_input()`.

    A default value is only considered configured when it was explicitly
    given, so `None` is a valid default."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_value: Any = None
    """Returned verbatim when the user enters an empty line. Never validated
    against the prompt's type."""
    is_async: bool = False
    """Whether `prompt_input()` returns a coroutine instead of blocking."""
    coerce_items: bool = False
    """If True, `array` and `tuple` prompts return the coerced item values
    instead of the trimmed item strings."""
    exit_token: str = Field(default="q", min_length=1)
    """The token that ends the process when typed at the prompt."""

    @field_validator("exit_token")
    @classmethod
    def normalize_exit_token(cls, v: str) -> str:
        token = v.strip().casefold()
        if not token:
            raise ValueError("exit_token must not be blank")
        return token

    @property
    def has_default(self) -> bool:
        return "default_value" in self.model_fields_set
