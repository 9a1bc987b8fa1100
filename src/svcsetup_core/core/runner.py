import shlex
import subprocess
from abc import ABC, abstractmethod

from .errors import ActionError

# Exit statuses a shell reports for commands it cannot run
COMMAND_NOT_EXECUTABLE = 126
COMMAND_NOT_FOUND = 127


class CommandRunner(ABC):
    """Runs external commands on behalf of the executor."""

    @abstractmethod
    def run(self, command: str) -> int:
        """
        Runs command to completion.

        Returns:
            The exit status of the command.
        """
        pass


class SubprocessRunner(CommandRunner):
    """Runs commands with subprocess, blocking until they exit."""

    def run(self, command: str) -> int:
        try:
            result = subprocess.run(shlex.split(command))
        except FileNotFoundError:
            return COMMAND_NOT_FOUND
        except PermissionError:
            return COMMAND_NOT_EXECUTABLE
        except OSError as e:
            raise ActionError(f"cannot run '{command}': {e.strerror or e}")
        return result.returncode
