"""
Patches the process environment from the output of PATCH_ENV_COMMAND
"""
import asyncio
from typing import List, Optional

from patchenv.core.logging import LoggingManager
from patchenv.core.settings import PatchSettings
from patchenv.modules.command_runner import CommandRunner
from patchenv.modules.environment import EnvironmentTable
from patchenv.modules.output_parser import EnvPair, apply_output


class EnvironmentPatcher:
    """
    Runs the command named by the control variable and applies its
    KEY=value output to the environment.

    Usage:
        EnvironmentPatcher().patch()

    A failing command raises PatchCommandError and leaves the environment
    untouched. Bad output lines only produce warnings.
    """
    def __init__(self, environment: Optional[EnvironmentTable] = None, settings: PatchSettings = PatchSettings()):
        self.environment = environment if environment is not None else EnvironmentTable()
        self.settings = settings
        self.runner = CommandRunner(self.environment, settings)
        self.logger = LoggingManager()

    def command(self) -> str:
        return self.environment.get(self.settings.command_var)

    def patch(self) -> List[EnvPair]:
        """Run the patch and return the pairs applied, empty for a no-op."""
        command = self.command()
        if not command:
            self.logger.trace(f"{self.settings.command_var} is not set, nothing to patch")
            return []
        stdout = self.runner.run(command)
        return apply_output(stdout, self.environment)


def patch() -> None:
    """
    Patch os.environ from the output of $PATCH_ENV_COMMAND.

    Does nothing when the variable is unset or empty.

    Raises:
        PatchCommandError: the command failed to start or exited non-zero.
    """
    EnvironmentPatcher().patch()


async def patch_async() -> None:
    """Run patch() in a worker thread so the event loop keeps running."""
    await asyncio.to_thread(patch)
