"""
Centralized error handling for the textcal CLI.

Maps exception families to consistent terminal output, log records and
exit codes.
"""

import sys
from typing import Any, Callable, Optional

from rich.console import Console
from rich.markup import escape

from textcal.exceptions import (
    CLIError,
    ConfigurationError,
    TextcalError,
    TextcalValueError,
)
from textcal.logging_integration import get_logger

EXIT_UNEXPECTED = 1
EXIT_CLI = 2
EXIT_CONFIGURATION = 3
EXIT_VALUE = 4
EXIT_TEXTCAL = 10
EXIT_SYSTEM = 11


class CLIErrorHandler:
    """Centralized error handler for textcal CLI operations."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)
        self.logger = get_logger("textcal.cli.error")

    def _print_details(self, error: TextcalError) -> None:
        if error.location:
            self.console.print(f"[dim]In: {escape(error.location)}[/dim]", highlight=False)
        if error.help_text:
            self.console.print(f"[blue]Help: {escape(error.help_text)}[/blue]", highlight=False)
        if error.user_action:
            self.console.print(f"[green]Action: {escape(error.user_action)}[/green]", highlight=False)

    def handle_keyboard_interrupt(self) -> None:
        """Handle user cancellation (Ctrl+C)."""
        self.console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(EXIT_UNEXPECTED)

    def handle_configuration_error(self, error: ConfigurationError) -> None:
        self.console.print(f"[red]Configuration Error: {escape(error.message)}[/red]", highlight=False)
        self._print_details(error)
        self._log_error("Configuration error", error)
        sys.exit(EXIT_CONFIGURATION)

    def handle_value_error(self, error: TextcalValueError) -> None:
        self.console.print(f"[red]Invalid Input: {escape(error.message)}[/red]", highlight=False)
        self._print_details(error)
        self._log_error("Invalid input", error)
        sys.exit(EXIT_VALUE)

    def handle_cli_error(self, error: CLIError) -> None:
        self.console.print(f"[red]Command Error: {escape(error.message)}[/red]", highlight=False)
        self._print_details(error)
        self._log_error("CLI error", error)
        sys.exit(EXIT_CLI)

    def handle_textcal_error(self, error: TextcalError) -> None:
        """Handle any other textcal exception with full context."""
        self.console.print(f"[red]Error: {escape(error.message)}[/red]", highlight=False)
        self._print_details(error)
        details = [f"{k}: {v}" for k, v in error.details.items() if v is not None]
        if details:
            self.console.print(f"[dim]Details: {escape(', '.join(details))}[/dim]", highlight=False)
        self.console.print(f"[dim]Error ID: {error.correlation_id}[/dim]")
        self._log_error("textcal error", error)
        sys.exit(EXIT_TEXTCAL)

    def handle_system_error(self, error: OSError) -> None:
        self.console.print(f"[red]System Error: {escape(str(error))}[/red]", highlight=False)
        self.console.print("[blue]Help: Check file paths and permissions[/blue]")
        self.logger.error(f"System error: {error}")
        sys.exit(EXIT_SYSTEM)

    def handle_unexpected_error(self, error: Exception) -> None:
        self.console.print(f"[red]Unexpected Error: {escape(str(error))}[/red]", highlight=False)
        self.console.print("[yellow]This may be a bug in textcal.[/yellow]")
        self.logger.exception(f"Unexpected error occurred: {error}")
        sys.exit(EXIT_UNEXPECTED)

    def _log_error(self, message: str, error: TextcalError) -> None:
        self.logger.error(
            f"{message} ({error.error_code}): {error.message}",
            **error.log_fields(),
        )


def create_error_handler(console: Optional[Console] = None) -> CLIErrorHandler:
    """Factory function to create a configured error handler."""
    return CLIErrorHandler(console=console)


def handle_cli_exceptions(error_handler: CLIErrorHandler, func: Callable, *args, **kwargs) -> Any:
    """Run ``func`` and turn every exception into a message and an exit code."""
    try:
        return func(*args, **kwargs)
    except KeyboardInterrupt:
        error_handler.handle_keyboard_interrupt()
    except ConfigurationError as e:
        error_handler.handle_configuration_error(e)
    except TextcalValueError as e:
        error_handler.handle_value_error(e)
    except CLIError as e:
        error_handler.handle_cli_error(e)
    except TextcalError as e:
        error_handler.handle_textcal_error(e)
    except OSError as e:
        error_handler.handle_system_error(e)
    except Exception as e:
        error_handler.handle_unexpected_error(e)
