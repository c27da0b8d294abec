"""
## typedprompt

Type-validated, single field command line prompts.

```python
from typedprompt import prompt_input

port = prompt_input("int", "Port: ", default_value=8080)
tags = prompt_input("array:str", "Tags (comma separated): ")
```

Invalid input is reported on stderr and the prompt is repeated. Typing
`q` at any prompt ends the process.
"""

from .logger import verbosity
from .errors import (
    TypedPromptError,
    ValidationError,
    DispatchError,
    InputClosedError,
    ExitRequested,
)
from .types import BaseType, TypeDescriptor, PromptConfig, parse_descriptor
from .dispatch import VALIDATORS, get_validator, validate
from .sources import (
    LineSource,
    AsyncLineSource,
    ConsoleLineSource,
    AsyncConsoleLineSource,
    IterableLineSource,
    AsyncIterableLineSource,
)
from .prompt import PromptLoop, prompt_input, async_prompt_input, is_exit_request

__all__ = [
    "verbosity",
    # errors
    "TypedPromptError",
    "ValidationError",
    "DispatchError",
    "InputClosedError",
    "ExitRequested",
    # types
    "BaseType",
    "TypeDescriptor",
    "PromptConfig",
    "parse_descriptor",
    # dispatch
    "VALIDATORS",
    "get_validator",
    "validate",
    # sources
    "LineSource",
    "AsyncLineSource",
    "ConsoleLineSource",
    "AsyncConsoleLineSource",
    "IterableLineSource",
    "AsyncIterableLineSource",
    # prompt
    "PromptLoop",
    "prompt_input",
    "async_prompt_input",
    "is_exit_request",
]
