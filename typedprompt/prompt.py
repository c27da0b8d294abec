"""typedprompt.prompt

Contains the `PromptLoop` class and the `prompt_input()` entry point.

A prompt repeatedly reads a line, and for each line:

1. ends the process if the line is the exit token (`q` by default),
2. returns the configured default if the line is empty,
3. validates the line against the type descriptor, returning the value
   or printing the failure reason to stderr and reading again.

The blocking and suspending modes differ only in how the line is read.
"""

from functools import cached_property
from typing import Any, Awaitable, Dict, Optional, Union

from rich.console import Console

from .dispatch import validate
from .errors import ExitRequested, ValidationError
from .logger import _get_logger
from .sources import (
    AsyncConsoleLineSource,
    AsyncLineSource,
    ConsoleLineSource,
    LineSource,
)
from .types.config import PromptConfig
from .types.descriptor import TypeDescriptor, parse_descriptor

logger = _get_logger(__name__)

__all__ = (
    "EXIT_NOTICE",
    "is_exit_request",
    "PromptLoop",
    "prompt_input",
    "async_prompt_input",
)


EXIT_NOTICE = "Exiting..."


def is_exit_request(raw: str, token: str = "q") -> bool:
    """Whether a raw line is the exit token, ignoring case and surrounding
    whitespace."""
    return raw.strip().casefold() == token.strip().casefold()


class PromptLoop:
    """
    Prompts for a single typed value until the user enters a valid one.

    Parameters:
        type_descriptor : str
            The type to ask for, e.g. `"int"` or `"enum:red|green|blue"`.
            Parsed on first use, so an exit request or a default value is
            honoured even if the descriptor is invalid.
        message : str
            The prompt message. `{}` placeholders are removed.
        config : Optional[PromptConfig]
            The prompt configuration.
        console : Optional[Console]
            Console for the prompt and the exit notice. Defaults to stdout.
        error_console : Optional[Console]
            Console for validation failures. Defaults to stderr.
    """

    def __init__(
        self,
        type_descriptor: str,
        message: str,
        config: Optional[PromptConfig] = None,
        *,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ):
        self.type_descriptor = type_descriptor
        self.message = message.replace("{}", "")
        self.config = config or PromptConfig()
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    @cached_property
    def descriptor(self) -> TypeDescriptor:
        return parse_descriptor(self.type_descriptor)

    @property
    def exit_hint(self) -> str:
        return f"To exit, press Ctrl+C or type '{self.config.exit_token}'."

    def handle(self, raw: str) -> Any:
        """
        Processes one line of input.

        Raises:
            ExitRequested
                If the line is the exit token.
            ValidationError
                If the line is not a valid value.
            DispatchError
                If the type descriptor is invalid.
        """
        if is_exit_request(raw, self.config.exit_token):
            self.console.print(EXIT_NOTICE, markup=False, highlight=False)
            logger.debug("Exit requested at the prompt.")
            raise ExitRequested(0)

        if not raw.strip() and self.config.has_default:
            return self.config.default_value

        return validate(
            self.descriptor, raw, coerce_items=self.config.coerce_items
        )

    def _report(self, error: ValidationError, attempt: int) -> None:
        logger.debug(
            f"Attempt {attempt} for '{self.type_descriptor}' failed: {error.reason}"
        )
        self.error_console.print(
            f"{error.reason} {self.exit_hint}",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

    def run(self, source: Optional[LineSource] = None) -> Any:
        """Prompts in blocking mode until a valid value is entered."""
        if source is None:
            with ConsoleLineSource(console=self.console) as owned:
                return self.run(owned)

        if not isinstance(source, LineSource):
            raise TypeError(
                "Blocking prompts need a LineSource, "
                f"got {type(source).__name__}."
            )

        attempt = 0
        while True:
            attempt += 1
            raw = source.read_line(self.message)
            try:
                return self.handle(raw)
            except ValidationError as e:
                self._report(e, attempt)

    async def arun(self, source: Optional[AsyncLineSource] = None) -> Any:
        """
        Prompts in suspending mode until a valid value is entered.

        If no source is given, a console source is opened for this call
        and closed before returning.
        """
        if source is None:
            async with AsyncConsoleLineSource(console=self.console) as owned:
                return await self.arun(owned)

        if not isinstance(source, AsyncLineSource):
            raise TypeError(
                "Suspending prompts need an AsyncLineSource, "
                f"got {type(source).__name__}."
            )

        attempt = 0
        while True:
            attempt += 1
            raw = await source.read_line(self.message)
            try:
                return self.handle(raw)
            except ValidationError as e:
                self._report(e, attempt)


def _build_config(
    config: Union[PromptConfig, Dict[str, Any], None],
    options: Dict[str, Any],
) -> PromptConfig:
    if config is None:
        return PromptConfig(**options)
    if isinstance(config, dict):
        return PromptConfig(**{**config, **options})
    if options:
        # only carry over explicitly set fields, so `has_default` survives
        given = {name: getattr(config, name) for name in config.model_fields_set}
        return PromptConfig(**{**given, **options})
    return config


def prompt_input(
    type_descriptor: str,
    message: str,
    config: Union[PromptConfig, Dict[str, Any], None] = None,
    *,
    source: Union[LineSource, AsyncLineSource, None] = None,
    console: Optional[Console] = None,
    error_console: Optional[Console] = None,
    **options: Any,
) -> Union[Any, Awaitable[Any]]:
    """
    Prompts the user for a single value of the given type.

    Args:
        type_descriptor : str
            The type to ask for, e.g. `"int"`, `"array:email"`,
            `"tuple:int|str"` or `"enum:red|green|blue"`.
        message : str
            The prompt message written before each read.
        config : Union[PromptConfig, Dict[str, Any], None]
            The prompt configuration. Keyword `options` are merged over it.
        source : Union[LineSource, AsyncLineSource, None]
            Where lines are read from. Defaults to the terminal.
        console : Optional[Console]
            Console for the prompt. Defaults to stdout.
        error_console : Optional[Console]
            Console for validation failures. Defaults to stderr.
        **options : Any
            `PromptConfig` fields, e.g. `default_value="N/A"` or
            `is_async=True`.

    Returns:
        Union[Any, Awaitable[Any]]
            The validated value, or a coroutine resolving to it when
            `is_async` is set.

    Examples:
        ```python
        age = prompt_input("int", "Age: ")
        color = prompt_input("enum:red|green|blue", "Color: ", default_value="red")
        when = await prompt_input("date", "When? ", is_async=True)
        ```
    """
    config = _build_config(config, options)
    loop = PromptLoop(
        type_descriptor,
        message,
        config,
        console=console,
        error_console=error_console,
    )
    if config.is_async:
        return loop.arun(source)
    return loop.run(source)


async def async_prompt_input(
    type_descriptor: str,
    message: str,
    config: Union[PromptConfig, Dict[str, Any], None] = None,
    *,
    source: Optional[AsyncLineSource] = None,
    console: Optional[Console] = None,
    error_console: Optional[Console] = None,
    **options: Any,
) -> Any:
    """The suspending form of `prompt_input()`, regardless of `is_async`."""
    options["is_async"] = True
    return await prompt_input(
        type_descriptor,
        message,
        config,
        source=source,
        console=console,
        error_console=error_console,
        **options,
    )
