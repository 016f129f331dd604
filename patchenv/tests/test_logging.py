import io

from patchenv.core.logging import LoggingManager


def test_logging_manager_filters_by_level():
    sink = io.StringIO()
    manager = LoggingManager(log_level="warning", sink=sink)
    manager.setup()
    manager.debug("Debug message")
    manager.info("Info message")
    manager.warning("Warning message")
    manager.error("Error message")
    output = sink.getvalue()
    assert "Debug message" not in output
    assert "Info message" not in output
    assert "patchenv: Warning message" in output
    assert "patchenv: Error message" in output


def test_logging_manager_attributes_caller(log_records):
    LoggingManager().warning("from the test")
    assert log_records[-1]["name"] == __name__


def test_trace_records_hidden_below_trace_level():
    sink = io.StringIO()
    LoggingManager(log_level="DEBUG", sink=sink).setup()
    LoggingManager().trace("Trace message")
    assert "Trace message" not in sink.getvalue()
    LoggingManager(log_level="TRACE", sink=sink).setup()
    LoggingManager().trace("Trace message")
    assert "patchenv: Trace message" in sink.getvalue()
