"""typedprompt.types

Contains the data types used to describe a prompt: the parsed type
descriptor and the per-call configuration."""

from .config import PromptConfig
from .descriptor import (
    ArgKind,
    BaseType,
    TypeDescriptor,
    parse_descriptor,
)

__all__ = (
    "ArgKind",
    "BaseType",
    "TypeDescriptor",
    "PromptConfig",
    "parse_descriptor",
)
