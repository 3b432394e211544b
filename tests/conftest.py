"""Shared test fixtures for logbridge test suite."""

import io

import pytest

from logbridge.lib.log_lib import BridgeLogger, LevelGate, LogContext, Severity


# ---------------------------------------------------------------------------
# Fake host
# ---------------------------------------------------------------------------
class RecordingHost:
    """HostLog that records (level, message, error) tuples."""

    def __init__(self, enabled=("debug", "info", "warn", "error"), fail=False):
        self.enabled = set(enabled)
        self.fail = fail
        self.calls = []

    def _record(self, level, message, error):
        if self.fail:
            raise RuntimeError("host is gone")
        self.calls.append((level, message, error))

    def debug(self, message, error=None):
        self._record("debug", message, error)

    def info(self, message, error=None):
        self._record("info", message, error)

    def warn(self, message, error=None):
        self._record("warn", message, error)

    def error(self, message, error=None):
        self._record("error", message, error)

    def is_debug_enabled(self):
        return "debug" in self.enabled

    def is_info_enabled(self):
        return "info" in self.enabled

    def is_warn_enabled(self):
        return "warn" in self.enabled

    def is_error_enabled(self):
        return "error" in self.enabled


# ---------------------------------------------------------------------------
# Buffers, hosts, loggers
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def host():
    """A recording host with every level enabled."""
    return RecordingHost()


@pytest.fixture
def make_logger(buf):
    """Build an unbound (or bound, with host=) BridgeLogger writing to buf."""
    def _make(threshold=Severity.INFO, host=None, name="test"):
        ctx = LogContext(gate=LevelGate(threshold), host=host, stream=buf)
        return BridgeLogger(ctx, name)
    return _make


@pytest.fixture
def log(make_logger):
    """An unbound BridgeLogger at INFO writing to buf."""
    return make_logger()


def raised(exc):
    """Return exc after raising and catching it, so it has a traceback."""
    try:
        raise exc
    except BaseException as e:
        return e
