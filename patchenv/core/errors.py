"""
Exceptions raised by patchenv
"""
from typing import Optional, Union


class PatchEnvError(Exception):
    """Base class for patchenv errors."""


class PatchCommandError(PatchEnvError):
    """
    The patch command could not be started or exited with an error status.

    Attributes:
        command (str): The command text taken from the control variable.
        cause: What went wrong, an exception or a short description.
        returncode (int | None): Exit status, None if the process never ran.
    """
    def __init__(self, command: str, cause: Union[BaseException, str], returncode: Optional[int] = None):
        self.command = command
        self.cause = cause
        self.returncode = returncode
        super().__init__(f"patchenv command {command!r} failed: {cause}")
