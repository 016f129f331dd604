"""
Parses KEY=value lines from the patch command and applies them
"""
import os
from typing import Iterator, List, NamedTuple, Optional

from patchenv.core.logging import LoggingManager
from patchenv.modules.environment import EnvironmentTable

logger = LoggingManager()


class EnvPair(NamedTuple):
    key: str
    value: str


def decode_output(stdout: bytes) -> str:
    # Same decoding os.environ applies to the real environment
    return os.fsdecode(stdout)


def iter_lines(text: str) -> Iterator[str]:
    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def parse_line(line: str) -> Optional[EnvPair]:
    """
    Split line on the first '='.

    Returns None when the line has no '=' or the key is empty. Everything
    after the first '=' is the value, kept verbatim.
    """
    parts = line.split("=", 1)
    if len(parts) != 2 or not parts[0]:
        return None
    return EnvPair(parts[0], parts[1])


def apply_output(stdout: bytes, environment: EnvironmentTable) -> List[EnvPair]:
    """
    Apply every well-formed line of stdout to environment, in order.

    Malformed lines and rejected assignments are logged as warnings and
    skipped. Returns the pairs that were set.
    """
    applied = []
    for line in iter_lines(decode_output(stdout)):
        if not line:
            continue
        pair = parse_line(line)
        if pair is None:
            logger.warning(f"invalid line in patch command output: {line!r}")
            continue
        try:
            environment.set(pair.key, pair.value)
        except (ValueError, OSError) as e:
            logger.warning(f"failed to set {pair.key!r} to {pair.value!r}: {e}")
            continue
        applied.append(pair)
    logger.trace(f"Applied {len(applied)} environment variable(s)")
    return applied
