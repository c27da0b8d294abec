"""
tests.test_sources

Contains tests for the blocking and suspending line sources.
"""

import asyncio
import io
import os
import signal
import subprocess
import sys
import time
from pathlib import Path

import pytest
from rich.console import Console

from typedprompt import (
    AsyncConsoleLineSource,
    AsyncIterableLineSource,
    ConsoleLineSource,
    InputClosedError,
    IterableLineSource,
)


def test_console_source_reads_stream():
    out = io.StringIO()
    source = ConsoleLineSource(
        console=Console(file=out), stream=io.StringIO("hello\r\nworld\n")
    )
    assert source.read_line("First: ") == "hello"
    assert source.read_line("Second: ") == "world"
    assert "First: " in out.getvalue()
    assert "Second: " in out.getvalue()

    with pytest.raises(InputClosedError):
        source.read_line("Third: ")


def test_console_source_stdin_eof(monkeypatch):
    def raise_eof(*args):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    source = ConsoleLineSource(console=Console(file=io.StringIO()))
    with pytest.raises(InputClosedError):
        source.read_line("Value: ")


def test_console_source_reads_stdin(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda *args: "typed")
    source = ConsoleLineSource(console=Console(file=io.StringIO()))
    assert source.read_line("Value: ") == "typed"


def test_closed_source_refuses_reads():
    with IterableLineSource(["a"], console=Console(file=io.StringIO())) as source:
        pass
    assert source.closed
    with pytest.raises(InputClosedError):
        source.read_line("Value: ")


def test_iterable_source_echo():
    out = io.StringIO()
    source = IterableLineSource(["42"], console=Console(file=out, width=200))
    assert source.read_line("Age: ") == "42"
    assert "Age: 42" in out.getvalue()

    silent = io.StringIO()
    source = IterableLineSource(["42"], console=Console(file=silent), echo=False)
    assert source.read_line("Age: ") == "42"
    assert silent.getvalue() == ""


def test_async_iterable_source():
    async def main():
        async with AsyncIterableLineSource(
            ["a", "b"], console=Console(file=io.StringIO())
        ) as source:
            lines = [await source.read_line("> "), await source.read_line("> ")]
            with pytest.raises(InputClosedError):
                await source.read_line("> ")
        return lines, source

    lines, source = asyncio.run(main())
    assert lines == ["a", "b"]
    assert source.closed


def test_async_console_source_reads_off_the_event_loop():
    out = io.StringIO()

    async def main():
        async with AsyncConsoleLineSource(
            console=Console(file=out), stream=io.StringIO("42\n")
        ) as source:
            line = await source.read_line("Age: ")
        return line, source

    line, source = asyncio.run(main())
    assert line == "42"
    assert source.closed
    assert "Age: " in out.getvalue()


def test_async_console_source_close_is_idempotent():
    async def main():
        source = AsyncConsoleLineSource(console=Console(file=io.StringIO()))
        await source.aclose()
        await source.aclose()
        with pytest.raises(InputClosedError):
            await source.read_line("> ")
        return source

    assert asyncio.run(main()).closed


def test_console_source_prompt_is_not_highlighted():
    out = io.StringIO()
    console = Console(file=out, force_terminal=True, color_system="truecolor")
    source = ConsoleLineSource(console=console, stream=io.StringIO("42\n"))
    assert source.read_line("Age (1-120) [default 'x']: ") == "42"
    assert "Age (1-120) [default 'x']: " in out.getvalue()
    assert "\x1b[" not in out.getvalue()


@pytest.mark.skipif(sys.platform == "win32", reason="needs POSIX signals")
def test_async_console_source_exits_on_interrupt():
    root = Path(__file__).resolve().parents[1]
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        filter(None, [str(root), env.get("PYTHONPATH")])
    )
    script = (
        "import asyncio\n"
        "from typedprompt import prompt_input\n"
        "asyncio.run(prompt_input('int', 'Age: ', is_async=True))\n"
    )
    proc = subprocess.Popen(
        [sys.executable, "-c", script],
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        env=env,
    )
    try:
        # the prompt is written right before the read blocks
        assert proc.stdout.read(len(b"Age: ")) == b"Age: "
        time.sleep(0.5)
        proc.send_signal(signal.SIGINT)
        returncode = proc.wait(timeout=10)
    except subprocess.TimeoutExpired:
        proc.kill()
        proc.wait()
        pytest.fail("the process hung after Ctrl+C")
    finally:
        for pipe in (proc.stdin, proc.stdout, proc.stderr):
            pipe.close()
    assert returncode != 0


if __name__ == "__main__":
    pytest.main([__file__])
