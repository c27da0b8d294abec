"""
Command line entry point. Prompts for a single typed value and writes it
to stdout as JSON, so shell scripts can ask for validated input:

```bash
python -m typedprompt "enum:dev|staging|prod" "Environment: " --default dev
```
"""

import argparse
import asyncio
import sys
from typing import List, Optional

import msgspec
from rich.console import Console

from .errors import DispatchError, InputClosedError
from .logger import verbosity
from .prompt import prompt_input


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typedprompt",
        description="Prompt for a single type-validated value and print it as JSON",
    )
    parser.add_argument("type", help="Type descriptor, e.g. 'int' or 'tuple:int|str'")
    parser.add_argument("message", nargs="?", default="", help="Prompt message")
    parser.add_argument(
        "--default",
        dest="default_value",
        help="Value returned when an empty line is entered",
    )
    parser.add_argument(
        "--async",
        dest="is_async",
        action="store_true",
        help="Read input without blocking the event loop",
    )
    parser.add_argument(
        "--coerce-items",
        action="store_true",
        help="Return coerced values for array and tuple items",
    )
    parser.add_argument(
        "-v",
        "--verbosity",
        choices=["debug", "info", "warning", "error", "critical"],
        default="warning",
        help="Log level of the typedprompt logger",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    verbosity(args.verbosity)

    options = {"is_async": args.is_async, "coerce_items": args.coerce_items}
    if args.default_value is not None:
        options["default_value"] = args.default_value

    # the prompt goes to stderr so stdout only carries the JSON value
    console = Console(stderr=True)
    error_console = Console(stderr=True)

    try:
        result = prompt_input(
            args.type,
            args.message,
            console=console,
            error_console=error_console,
            **options,
        )
        if args.is_async:
            result = asyncio.run(result)
    except DispatchError as e:
        error_console.print(f"Error: {e}", markup=False, highlight=False)
        return 2
    except InputClosedError as e:
        error_console.print(f"Error: {e}", markup=False, highlight=False)
        return 1
    except KeyboardInterrupt:
        return 130

    sys.stdout.write(msgspec.json.encode(result).decode("utf-8") + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
