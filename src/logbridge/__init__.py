"""logbridge — level-gated logging adapter for build-tool plugins.

Routes {}-placeholder logging calls to the host build tool's logger
when bound, or to stdout as "[LEVEL] message" lines when not.
"""

from logbridge._version import __version__, __app_name__
from logbridge.bridge import LoggerFactory, create_context
from logbridge.host import LoggingHost, probe_threshold
from logbridge.lib.log_lib import (
    BridgeLogger, LevelGate, LogContext, Severity, format_message, traced,
)

__all__ = [
    "__version__", "__app_name__",
    "LoggerFactory", "create_context",
    "LoggingHost", "probe_threshold",
    "BridgeLogger", "LevelGate", "LogContext", "Severity",
    "format_message", "traced",
]
