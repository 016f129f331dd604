"""
Names of the environment variables patchenv reads
"""
from dataclasses import dataclass

PATCH_COMMAND_VAR = "PATCH_ENV_COMMAND"
SHELL_VAR = "SHELL"
SHELL_COMMAND_FLAG = "-c"
LOG_LEVEL_VAR = "PATCH_ENV_LOG_LEVEL"


@dataclass(frozen=True)
class PatchSettings:
    command_var: str = PATCH_COMMAND_VAR
    shell_var: str = SHELL_VAR
    shell_flag: str = SHELL_COMMAND_FLAG
