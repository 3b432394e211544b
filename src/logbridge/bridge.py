"""Context construction and the logger factory.

Bridges config resolution with the log_lib BridgeLogger. Call
create_context() once at startup, then hand the context (or a
LoggerFactory over it) to whatever needs loggers.

Also re-exports the log_lib public API for convenience imports.

Usage:
    ctx = create_context()                                  # stdout, INFO
    ctx = create_context(host=LoggingHost(build_logger))    # bound
    log = LoggerFactory(ctx).get_logger("plugin.git")
"""

from logbridge.config import resolve_threshold

# Re-export log_lib public API — one-stop import for callers
from logbridge.lib.log_lib import (                     # noqa: F401
    BridgeLogger, LevelGate, LogContext, Severity,
    HostLog, PlaceholderLogger, format_message, traced,
)


def create_context(host=None, level=None, stream=None, environ=None):
    """Build a LogContext with its threshold resolved once.

    Args:
        host: HostLog to bind to; None writes to the stream
        level: Explicit threshold (overrides environment and host probe)
        stream: Text stream for unbound output; None means sys.stdout
        environ: Mapping used instead of os.environ

    Returns:
        The immutable LogContext
    """
    threshold = resolve_threshold(level=level, host=host, environ=environ)
    return LogContext(gate=LevelGate(threshold), host=host, stream=stream)


class LoggerFactory:
    """Hands out one BridgeLogger per name, all sharing a context."""

    def __init__(self, context=None):
        self.context = context if context is not None else create_context()
        self._loggers = {}

    def get_logger(self, name=None):
        key = name or BridgeLogger.__name__
        logger = self._loggers.get(key)
        if logger is None:
            logger = self._loggers.setdefault(key, BridgeLogger(self.context, key))
        return logger
