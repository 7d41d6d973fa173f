"""
CLI-related exceptions.

Raised by the command functions for option combinations that click's own
parsing cannot express. ``operation`` is the subcommand name.
"""

from typing import Optional

from .base import ExceptionContext, TextcalError


class CLIError(TextcalError):
    """Base class for command-line usage errors."""

    default_code = "CLI_USAGE"

    def __init__(self, command: str, message: str, argument: Optional[str] = None):
        self.command = command
        context = ExceptionContext(
            operation=command,
            argument=argument,
            help_text=f"Run 'textcal {command} --help' for usage",
        )
        super().__init__(message, context)


class InvalidCommandError(CLIError):
    """Raised when options of a command are combined in an unsupported way."""

    default_code = "INVALID_COMMAND"

    def __init__(self, command: str, reason: str):
        super().__init__(command, f"Invalid use of 'textcal {command}': {reason}")


class MissingArgumentError(CLIError):
    """Raised when a command needs one of several optional arguments and got none."""

    default_code = "MISSING_ARGUMENT"

    def __init__(self, command: str, argument: str):
        super().__init__(command, f"'textcal {command}' needs {argument}", argument=argument)
