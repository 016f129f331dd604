"""
Centralized logging manager for patchenv
"""
import sys

from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> patchenv: {message}"


class LoggingManager:
    def __init__(self, log_level: str = "WARNING", sink=None):
        self.log_level = log_level.upper()
        self.sink = sink if sink is not None else sys.stderr

    def setup(self):
        logger.remove()
        logger.add(self.sink, level=self.log_level, format=LOG_FORMAT)
        logger.debug(f"Logging initialized at level: {self.log_level}")

    # depth=1 attributes each record to the module that called the manager
    def trace(self, message: str):
        logger.opt(depth=1).trace(message)

    def debug(self, message: str):
        logger.opt(depth=1).debug(message)

    def info(self, message: str):
        logger.opt(depth=1).info(message)

    def warning(self, message: str):
        logger.opt(depth=1).warning(message)

    def error(self, message: str):
        logger.opt(depth=1).error(message)
