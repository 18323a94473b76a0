"""Reporting of non-fatal traversal problems."""
from typing import Any, Dict, List, Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape

from .reader_types import TraversalIssue


@runtime_checkable
class ErrorHandler(Protocol):
    """Protocol for error handlers."""

    def handle_error(self, error: TraversalIssue) -> None:
        """Handle a traversal issue."""
        ...

    def get_errors(self) -> List[TraversalIssue]:
        """Get all accumulated issues."""
        ...


class CollectingErrorHandler:
    """Error handler that only keeps the issues it receives."""

    def __init__(self):
        self.errors: List[TraversalIssue] = []

    def handle_error(self, error: TraversalIssue) -> None:
        self.errors.append(error)

    def get_errors(self) -> List[TraversalIssue]:
        return self.errors.copy()


class ConsoleErrorHandler(CollectingErrorHandler):
    """Error handler that outputs to the console using rich."""

    def __init__(self, console: Console = None):
        super().__init__()
        self.console = console or Console(stderr=True)

    def handle_error(self, error: TraversalIssue) -> None:
        """Handle an issue by printing it to the console."""
        super().handle_error(error)
        message = f"[yellow]{error.error_type}[/yellow]: {escape(error.message)}"
        if error.error is not None:
            message += f"\n  Cause: {escape(str(error.error))}"
        self.console.print(f"{escape(str(error.path))}: {message}")


class FileErrorHandler(CollectingErrorHandler):
    """Error handler that writes to a log file."""

    def __init__(self, log_file: str):
        super().__init__()
        self.log_file = log_file

    def handle_error(self, error: TraversalIssue) -> None:
        """Handle an issue by appending it to the log file."""
        super().handle_error(error)
        with open(self.log_file, 'a', encoding='utf-8') as f:
            f.write(format_issue(error) + "\n")


class CompositeErrorHandler(CollectingErrorHandler):
    """Error handler that delegates to multiple handlers."""

    def __init__(self, handlers: List[ErrorHandler]):
        super().__init__()
        self.handlers = handlers

    def handle_error(self, error: TraversalIssue) -> None:
        super().handle_error(error)
        for handler in self.handlers:
            handler.handle_error(error)


def format_issue(error: TraversalIssue) -> str:
    """Format a traversal issue for display."""
    line = f"{error.path}: {error.error_type}: {error.message}"
    if error.error is not None:
        line += f" ({error.error})"
    return line


def format_issue_json(error: TraversalIssue) -> Dict[str, Any]:
    """Format a traversal issue as JSON."""
    return error.to_dict()
