"""
Patch the process environment from the output of an external command
"""
from patchenv.core.errors import PatchCommandError, PatchEnvError
from patchenv.modules.patcher import EnvironmentPatcher, patch, patch_async

__all__ = [
    "EnvironmentPatcher",
    "PatchCommandError",
    "PatchEnvError",
    "patch",
    "patch_async",
]
