"""
Base exception classes for textcal.

Every textcal error knows where it happened: the ``operation`` (library
function or CLI command) and the ``argument`` (parameter name or dotted
configuration field) that was rejected. Those two fields are what the CLI
prints and what the structured log records are keyed on.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ExceptionContext:
    """Location, error code and guidance for a textcal exception."""

    error_code: Optional[str] = None
    operation: Optional[str] = None
    argument: Optional[str] = None
    help_text: Optional[str] = None
    user_action: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)
    correlation_id: Optional[str] = None


class TextcalError(Exception):
    """Base exception for all textcal errors.

    Subclasses set ``default_code``; an explicit ``error_code`` in the
    context wins over it. ``operation`` may be left unset by the raising
    code, in which case the ``logged`` decorator around the public function
    fills it in on the way out.
    """

    default_code = "TEXTCAL_ERROR"

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        context = context or ExceptionContext()
        self.message = message
        self.error_code = context.error_code or self.default_code
        self.operation = context.operation
        self.argument = context.argument
        self.help_text = context.help_text
        self.user_action = context.user_action
        self.details = dict(context.details)
        self.correlation_id = context.correlation_id or uuid.uuid4().hex[:8]
        super().__init__(message)

    @property
    def location(self) -> Optional[str]:
        """``operation(argument)``, or whichever of the two is known."""
        if self.operation and self.argument:
            return f"{self.operation}({self.argument})"
        return self.operation or self.argument

    def __str__(self) -> str:
        lines = [f"[{self.error_code}] {self.message}"]
        if self.location:
            lines.append(f"  in {self.location}")
        if self.help_text:
            lines.append(f"  help: {self.help_text}")
        if self.user_action:
            lines.append(f"  try: {self.user_action}")
        return "\n".join(lines)

    def log_fields(self) -> Dict[str, Any]:
        """Keyword context for a TextcalLogger record about this error."""
        fields = {
            "error_type": type(self).__name__,
            "error_code": self.error_code,
            "operation": self.operation,
            "argument": self.argument,
            "error_id": self.correlation_id,
        }
        if self.details:
            fields["details"] = self.details
        return fields
