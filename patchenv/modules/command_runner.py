"""
Runs the patch command and applies the failure policy
"""
import os
import shlex
import subprocess
import sys
from typing import List, Union

from patchenv.core.errors import PatchCommandError
from patchenv.core.logging import LoggingManager
from patchenv.core.settings import PatchSettings
from patchenv.modules.environment import EnvironmentTable


class CommandRunner:
    """
    Executes a command line with the user's shell, or directly when no shell
    is configured, and captures its output.
    """
    def __init__(self, environment: EnvironmentTable, settings: PatchSettings = PatchSettings()):
        self.environment = environment
        self.settings = settings
        self.logger = LoggingManager()

    def resolve(self, command: str) -> Union[List[str], str]:
        """
        Build the process invocation for command.

        With a shell configured the shell parses the text. Without one the
        text is split with POSIX shlex rules (no pipes, redirection or
        expansion). On Windows the string is passed through unchanged and
        the program parses its own arguments.

        Raises:
            ValueError: the text cannot be split or holds no program name.
        """
        shell = self.environment.get(self.settings.shell_var)
        if shell:
            return [shell, self.settings.shell_flag, command]
        if os.name == "nt":
            return command
        argv = shlex.split(command)
        if not argv:
            raise ValueError("no program to run")
        return argv

    def run(self, command: str) -> bytes:
        """
        Run command with no stdin and return its captured stdout.

        On failure the captured stdout and stderr are written to this
        process's stdout and stderr before PatchCommandError is raised.
        """
        try:
            args = self.resolve(command)
        except ValueError as e:
            raise PatchCommandError(command, e) from e
        self.logger.trace(f"Running patch command as {args!r}")
        try:
            result = subprocess.run(
                args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                env=self.environment.snapshot(),
            )
        except OSError as e:
            raise PatchCommandError(command, e) from e
        if result.returncode != 0:
            forward_output(result.stdout, result.stderr)
            error = subprocess.CalledProcessError(result.returncode, args, result.stdout, result.stderr)
            raise PatchCommandError(command, describe_exit(result.returncode), result.returncode) from error
        return result.stdout


def describe_exit(returncode: int) -> str:
    if returncode < 0:
        return f"terminated by signal {-returncode}"
    return f"exit status {returncode}"


def forward_output(stdout: bytes, stderr: bytes):
    _write_bytes(sys.stdout, stdout)
    _write_bytes(sys.stderr, stderr)


def _write_bytes(stream, data: bytes):
    if not data:
        return
    stream.flush()
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        buffer.write(data)
        buffer.flush()
    else:
        stream.write(os.fsdecode(data))
        stream.flush()
