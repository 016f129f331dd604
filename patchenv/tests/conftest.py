import os
import shlex
import sys

import pytest
from loguru import logger

from patchenv.modules.environment import EnvironmentTable


@pytest.fixture(autouse=True)
def log_records():
    records = []
    logger.remove()
    logger.add(lambda msg: records.append(msg.record), level="DEBUG", format="{message}")
    yield records
    logger.remove()


@pytest.fixture
def warnings(log_records):
    def collect():
        return [r["message"] for r in log_records if r["level"].name == "WARNING"]
    return collect


@pytest.fixture
def python_command():
    """Build a direct command line that runs code with this interpreter."""
    def build(code):
        return f"{shlex.quote(sys.executable)} -c {shlex.quote(code)}"
    return build


@pytest.fixture
def fake_env():
    return {"PATH": os.environ.get("PATH", "")}


@pytest.fixture
def environment(fake_env):
    return EnvironmentTable(fake_env)
