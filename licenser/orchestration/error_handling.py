import sys
import logging
from enum import Enum
from typing import Optional, Dict, Any
from dataclasses import dataclass


class ErrorCategory(Enum):
    """Categories of errors that can occur while loading or scoring."""
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    FILE_IO = "file_io"


@dataclass
class ErrorContext:
    """Context information for an error."""
    file_path: Optional[str] = None
    spdx_id: Optional[str] = None
    operation: Optional[str] = None
    additional_info: Optional[Dict[str, Any]] = None


class LicenserError(Exception):
    """Base exception class for licenser errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        context: Optional[ErrorContext] = None,
        recoverable: bool = False,
        exit_code: int = 1
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.context = context or ErrorContext()
        self.recoverable = recoverable
        self.exit_code = exit_code

    def get_user_message(self) -> str:
        """Generate a user-friendly error message."""
        base_msg = self.message

        if self.context.file_path:
            base_msg += f" (File: {self.context.file_path})"
        if self.context.spdx_id:
            base_msg += f" (License: {self.context.spdx_id})"
        if self.context.operation:
            base_msg += f" (Operation: {self.context.operation})"

        return base_msg

    def get_log_message(self) -> str:
        """Generate a detailed log message."""
        log_msg = f"[{self.category.value.upper()}] {self.message}"

        if self.context.additional_info:
            details = ", ".join(f"{k}={v}" for k, v in self.context.additional_info.items())
            log_msg += f" | Details: {details}"

        return log_msg


class CatalogLoadError(LicenserError):
    """The catalog directory could not be resolved, listed or read."""

    def __init__(self, message: str, context: Optional[ErrorContext] = None):
        super().__init__(
            message,
            ErrorCategory.CONFIGURATION,
            context,
            recoverable=False,
            exit_code=2
        )


class MalformedRecord(LicenserError):
    """A catalog file does not split into front matter, metadata and text."""

    def __init__(self, message: str, context: Optional[ErrorContext] = None):
        super().__init__(
            message,
            ErrorCategory.VALIDATION,
            context,
            recoverable=False,
            exit_code=2
        )


class MetadataParseError(LicenserError):
    """The metadata block of a catalog file is not valid YAML or has the wrong shape."""

    def __init__(self, message: str, context: Optional[ErrorContext] = None):
        super().__init__(
            message,
            ErrorCategory.VALIDATION,
            context,
            recoverable=False,
            exit_code=2
        )


class InputReadError(LicenserError):
    """The text to be scored could not be read."""

    def __init__(self, message: str, context: Optional[ErrorContext] = None):
        super().__init__(
            message,
            ErrorCategory.FILE_IO,
            context,
            recoverable=True
        )


def handle_error(error: Exception, logger: logging.Logger) -> None:
    """
    Central error handler that logs appropriately and exits with proper code.

    Args:
        error: The exception that occurred
        logger: Logger instance for recording the error
    """
    if isinstance(error, LicenserError):
        logger.error(error.get_log_message())

        print(f"Error: {error.get_user_message()}", file=sys.stderr)

        sys.exit(error.exit_code)
    else:
        logger.error(f"Unexpected error: {str(error)}", exc_info=True)
        print("Error: An unexpected error occurred. Check the log file for details.", file=sys.stderr)
        sys.exit(1)
