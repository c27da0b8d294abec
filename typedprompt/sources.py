"""typedprompt.sources

Contains the `LineSource` and `AsyncLineSource` interfaces, which the
prompt loop reads lines of input from, along with their console backed
and scripted implementations.

Every source writes the prompt message before reading. Only one source
should read from the process' stdin at a time.
"""

import asyncio
import threading
from abc import ABC, abstractmethod
from typing import IO, Iterable, Iterator, Optional

from rich.console import Console

from .errors import InputClosedError
from .logger import _get_logger

logger = _get_logger(__name__)

__all__ = (
    "LineSource",
    "AsyncLineSource",
    "ConsoleLineSource",
    "AsyncConsoleLineSource",
    "IterableLineSource",
    "AsyncIterableLineSource",
)


# ------------------------------------------------------------------------------
# Interfaces
# ------------------------------------------------------------------------------


class LineSource(ABC):
    """
    A blocking source of input lines. `read_line()` suspends the calling
    thread until a full line is available.
    """

    closed: bool = False

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """
        Writes `prompt` and reads a single line, without its line ending.

        Raises:
            InputClosedError
                If the input ended before a line was read.
        """

    def close(self) -> None:
        self.closed = True

    def _check_open(self) -> None:
        if self.closed:
            raise InputClosedError("Cannot read from a closed line source.")

    def __enter__(self) -> "LineSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncLineSource(ABC):
    """
    A suspending source of input lines. Awaiting `read_line()` yields to
    the event loop until a full line is available.
    """

    closed: bool = False

    @abstractmethod
    async def read_line(self, prompt: str) -> str:
        """The awaitable counterpart of `LineSource.read_line()`."""

    async def aclose(self) -> None:
        self.closed = True

    def _check_open(self) -> None:
        if self.closed:
            raise InputClosedError("Cannot read from a closed line source.")

    async def __aenter__(self) -> "AsyncLineSource":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


# ------------------------------------------------------------------------------
# Console
# ------------------------------------------------------------------------------


class ConsoleLineSource(LineSource):
    """
    Reads lines from the terminal through a `rich` console.

    Parameters:
        console : Optional[Console]
            The console the prompt is written to. Defaults to a console
            on stdout.
        stream : Optional[IO[str]]
            Read from this stream instead of stdin.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        stream: Optional[IO[str]] = None,
    ):
        self.console = console or Console()
        self.stream = stream

    def read_line(self, prompt: str) -> str:
        self._check_open()
        # written as-is: no markup, no highlighting of numbers or quotes
        self.console.print(prompt, markup=False, highlight=False, end="")
        try:
            line = self.console.input(stream=self.stream)
        except EOFError as e:
            raise InputClosedError("Input ended before a value was entered.") from e

        if self.stream is not None:
            # streams signal EOF with an empty read instead of EOFError
            if not line:
                raise InputClosedError("Input ended before a value was entered.")
            line = line.rstrip("\r\n")
        return line


def _settle(
    future: asyncio.Future, line: Optional[str], error: Optional[Exception]
) -> None:
    if future.done():
        return
    if error is not None:
        future.set_exception(error)
    else:
        future.set_result(line)


class AsyncConsoleLineSource(AsyncLineSource):
    """
    Reads lines from the terminal without blocking the event loop.

    Each read runs on a daemon thread that hands the line back to the
    event loop. A read blocked on the terminal cannot be interrupted, so
    on Ctrl+C or `aclose()` the thread is abandoned rather than joined,
    and the process can still exit.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        stream: Optional[IO[str]] = None,
    ):
        self._reader = ConsoleLineSource(console=console, stream=stream)
        self._thread: Optional[threading.Thread] = None

    @property
    def console(self) -> Console:
        return self._reader.console

    async def read_line(self, prompt: str) -> str:
        self._check_open()
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def read() -> None:
            try:
                line, error = self._reader.read_line(prompt), None
            except Exception as e:
                line, error = None, e
            try:
                loop.call_soon_threadsafe(_settle, future, line, error)
            except RuntimeError:
                # the event loop was closed while we were reading
                logger.debug("Dropped a line read after the event loop closed.")

        self._thread = threading.Thread(
            target=read, name="typedprompt-input", daemon=True
        )
        self._thread.start()
        return await future

    async def aclose(self) -> None:
        if self.closed:
            return
        await super().aclose()
        self._reader.close()
        self._thread = None
        logger.debug("Closed async console line source.")


# ------------------------------------------------------------------------------
# Scripted
# ------------------------------------------------------------------------------


class IterableLineSource(LineSource):
    """
    Serves pre-collected lines, e.g. from a test or a pipe that was
    already read. The prompt and the line are echoed to `console` as a
    terminal session would show them, unless `echo` is False.
    """

    def __init__(
        self,
        lines: Iterable[str],
        console: Optional[Console] = None,
        echo: bool = True,
    ):
        self._lines: Iterator[str] = iter(lines)
        self.console = console or Console()
        self.echo = echo

    def read_line(self, prompt: str) -> str:
        self._check_open()
        try:
            line = next(self._lines)
        except StopIteration:
            raise InputClosedError("No more input lines.") from None
        if self.echo:
            self.console.print(
                f"{prompt}{line}", markup=False, highlight=False, soft_wrap=True
            )
        return line


class AsyncIterableLineSource(AsyncLineSource):
    """The suspending counterpart of `IterableLineSource`."""

    def __init__(
        self,
        lines: Iterable[str],
        console: Optional[Console] = None,
        echo: bool = True,
    ):
        self._reader = IterableLineSource(lines, console=console, echo=echo)

    @property
    def console(self) -> Console:
        return self._reader.console

    async def read_line(self, prompt: str) -> str:
        self._check_open()
        # yield once per line, as a real input event would
        await asyncio.sleep(0)
        return self._reader.read_line(prompt)

    async def aclose(self) -> None:
        await super().aclose()
        self._reader.close()
