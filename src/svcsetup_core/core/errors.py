from typing import Optional

USAGE_EXIT_CODE = 255
FAILURE_EXIT_CODE = 1


class SetupError(Exception):
    """Base class for every fatal condition raised by the setup tool."""

    exit_code = FAILURE_EXIT_CODE

    def __init__(self, message: str, exit_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class UsageError(SetupError):
    """Bad or missing command line arguments."""

    exit_code = USAGE_EXIT_CODE


class DetectionError(SetupError):
    """The daemon binary or the init system could not be determined."""


class ActionError(SetupError):
    """An external command or a file operation failed."""


class HelpRequested(UsageError):
    """--help was given; usage is printed without an error line."""
