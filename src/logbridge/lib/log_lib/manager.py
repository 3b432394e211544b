"""
BridgeLogger — level-gated dispatch to a host logger or an output stream.

A LogContext carries everything a logger needs: the level gate, the
optional host the adapter is bound to, and the stream used when it is
not bound. Contexts are built once at startup and passed explicitly;
there is no module-level logger state.

Dispatch for one call:

    gate disabled  →  return (nothing is formatted)
    bound          →  host.<level>(message, error)
    unbound        →  stream.write("[LEVEL] message\\n")

TRACE goes to the host's debug level, and is labelled DEBUG on the
stream, since the host tool has no trace level.
"""

import sys
from dataclasses import dataclass, field
from typing import Any, Optional, TextIO

from .formatter import FormattedMessage, array_format
from .gate import LevelGate
from .interfaces import HostLog
from .levels import Severity, parse_severity


@dataclass(frozen=True)
class LogContext:
    """Shared, immutable settings for a set of bridge loggers.

    Attributes:
        gate: Level gate holding the output threshold
        host: Host logger calls are forwarded to; None when unbound
        stream: Output stream when unbound; None means sys.stdout,
            looked up at write time
    """
    gate: LevelGate = field(default_factory=LevelGate)
    host: Optional[HostLog] = None
    stream: Optional[TextIO] = None

    @property
    def bound(self) -> bool:
        return self.host is not None

    @property
    def threshold(self) -> Severity:
        return self.gate.threshold


# Host method per severity
_HOST_METHODS = {
    Severity.TRACE: 'debug',
    Severity.DEBUG: 'debug',
    Severity.INFO: 'info',
    Severity.WARN: 'warn',
    Severity.ERROR: 'error',
}

# Severity a bridge-logger host receives
_HOST_SEVERITY = {sev: Severity[name.upper()] for sev, name in _HOST_METHODS.items()}


class BridgeLogger:
    """The single logger handed to plugin code.

    Satisfies both PlaceholderLogger (``info("{} done", n)``) and HostLog
    (``info(message, error)``): a trailing exception is appended to the
    message rather than substituted. Another bridge logger bound to this
    one as its host hands over the formatted message via emit().

    Usage::

        ctx = LogContext(gate=LevelGate(Severity.DEBUG))
        log = BridgeLogger(ctx, 'plugin')
        log.info("Resolved {} in {}ms", "HEAD", 12)
        log.error("Could not read {}", path, exc)
    """

    def __init__(self, context: LogContext = None, name: str = None):
        self.context = context if context is not None else LogContext()
        self._name = name or type(self).__name__
        self._write_failed = False

    @property
    def name(self) -> str:
        return self._name

    # -----------------------------------------------------------------
    # Level queries
    # -----------------------------------------------------------------

    def is_enabled_for(self, severity) -> bool:
        return self.context.gate.is_enabled(severity)

    def is_trace_enabled(self) -> bool:
        return self.is_enabled_for(Severity.TRACE)

    def is_debug_enabled(self) -> bool:
        return self.is_enabled_for(Severity.DEBUG)

    def is_info_enabled(self) -> bool:
        return self.is_enabled_for(Severity.INFO)

    def is_warn_enabled(self) -> bool:
        return self.is_enabled_for(Severity.WARN)

    def is_error_enabled(self) -> bool:
        return self.is_enabled_for(Severity.ERROR)

    # -----------------------------------------------------------------
    # Logging calls
    # -----------------------------------------------------------------

    def log(self, severity, msg: Any, *args: Any,
            error: Optional[BaseException] = None) -> None:
        """Emit msg at severity if the gate allows it.

        Args:
            severity: Severity of the call
            msg: Template with {} placeholders (or an exception)
            *args: Substitution values; a trailing exception is appended
            error: Error to append, as in the host's (message, error) shape
        """
        if not self.context.gate.is_enabled(severity):
            return
        if error is not None:
            args = args + (error,)
        self._dispatch(parse_severity(severity), array_format(msg, args))

    def emit(self, severity, formatted: FormattedMessage) -> None:
        """Emit an already formatted message; no placeholder substitution.

        Used when this logger is the host of another bridge logger, so
        the message is not formatted a second time.
        """
        if not self.context.gate.is_enabled(severity):
            return
        self._dispatch(parse_severity(severity), formatted)

    def _dispatch(self, severity: Severity, formatted: FormattedMessage) -> None:
        if self.context.host is not None:
            if self._forward(severity, formatted):
                return
        self._write(f"[{severity.label}] {formatted.render()}\n")

    def trace(self, msg: Any, *args: Any, error: Optional[BaseException] = None) -> None:
        self.log(Severity.TRACE, msg, *args, error=error)

    def debug(self, msg: Any, *args: Any, error: Optional[BaseException] = None) -> None:
        self.log(Severity.DEBUG, msg, *args, error=error)

    def info(self, msg: Any, *args: Any, error: Optional[BaseException] = None) -> None:
        self.log(Severity.INFO, msg, *args, error=error)

    def warn(self, msg: Any, *args: Any, error: Optional[BaseException] = None) -> None:
        self.log(Severity.WARN, msg, *args, error=error)

    warning = warn

    def error(self, msg: Any, *args: Any, error: Optional[BaseException] = None) -> None:
        self.log(Severity.ERROR, msg, *args, error=error)

    # -----------------------------------------------------------------
    # Sinks
    # -----------------------------------------------------------------

    def _forward(self, severity: Severity, formatted) -> bool:
        """Send to the host. Returns False if the host call failed."""
        host = self.context.host
        try:
            if isinstance(host, BridgeLogger):
                host.emit(_HOST_SEVERITY[severity], formatted)
                return True
            method = getattr(host, _HOST_METHODS[severity])
            if formatted.error is not None:
                method(formatted.message, formatted.error)
            else:
                method(formatted.message)
            return True
        except Exception as e:
            print(f"logbridge: host logger failed ({type(e).__name__}: {e}); "
                  f"writing to stream", file=sys.stderr)
            return False

    def _write(self, line: str) -> None:
        """Write one full line in a single call.

        A failing stream drops the line; only the first failure per
        logger is reported on stderr.
        """
        stream = self.context.stream if self.context.stream is not None else sys.stdout
        try:
            stream.write(line)
            stream.flush()
        except Exception as e:
            if not self._write_failed:
                self._write_failed = True
                print(f"logbridge: dropping log lines ({type(e).__name__}: {e})",
                      file=sys.stderr)

    def __repr__(self):
        state = 'bound' if self.context.bound else 'unbound'
        return (f"BridgeLogger(name={self._name!r}, "
                f"threshold={self.context.threshold.name}, {state})")
