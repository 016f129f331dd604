"""
Access point for the process environment
"""
import os
from typing import Dict, MutableMapping, Optional


class EnvironmentTable:
    """
    Reads and writes environment variables.

    Defaults to os.environ. Tests pass a plain dict instead so the real
    process environment stays untouched.
    """
    def __init__(self, env_vars: Optional[MutableMapping[str, str]] = None):
        self.env_vars = os.environ if env_vars is None else env_vars

    def get(self, name: str) -> str:
        """Return the value of name, or an empty string when unset."""
        return self.env_vars.get(name, "")

    def set(self, name: str, value: str):
        """
        Set name to value.

        Raises:
            ValueError: name is empty or contains '=' or a NUL character, or
                value contains a NUL character.
        """
        if not name or "=" in name:
            raise ValueError(f"illegal environment variable name {name!r}")
        if "\0" in name or "\0" in value:
            raise ValueError("embedded null character")
        self.env_vars[name] = value

    def snapshot(self) -> Dict[str, str]:
        return dict(self.env_vars)
