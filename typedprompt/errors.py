"""typedprompt.errors

Contains the exceptions raised by the `typedprompt` library.

Two classes of failure exist within a prompt:

- `ValidationError` : the user typed something that is not a valid
  value for the requested type. The prompt loop always recovers from
  these by printing the reason and asking again.
- `DispatchError` : the type descriptor given by the caller is
  malformed or names an unknown type. These are programmer errors and
  always propagate out of the prompt call.
"""

__all__ = (
    "TypedPromptError",
    "ValidationError",
    "DispatchError",
    "InputClosedError",
    "ExitRequested",
)


class TypedPromptError(Exception):
    """
    Base exception for all errors raised by the `typedprompt` library.
    """


class ValidationError(TypedPromptError, ValueError):
    """
    Raised by a validator when a raw token cannot be coerced into
    the requested type. The message is shown to the user as-is.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class DispatchError(TypedPromptError):
    """
    Raised when a type descriptor cannot be resolved into a validator.
    """


class InputClosedError(TypedPromptError, EOFError):
    """
    Raised when the input stream ends before a valid value was read.
    """


class ExitRequested(SystemExit):
    """
    Raised when the user types the exit token.

    Subclasses `SystemExit` with a status of 0, so left uncaught it ends
    the process cleanly. Callers that want to keep running can catch it.
    """

    def __init__(self, code: int = 0):
        super().__init__(code)
