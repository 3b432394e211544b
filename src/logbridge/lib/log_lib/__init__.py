"""
log_lib — level-gated placeholder logging with host forwarding.

A reusable logging adapter providing:
- Ordered severities (TRACE < DEBUG < INFO < WARN < ERROR)
- A write-once level gate (requested >= threshold)
- {} placeholder formatting with trailing-exception handling
- A bridge logger that forwards to a bound host or writes to a stream
- Function tracing decorator

Public API:
    Severity          — severity enum
    parse_severity    — parse a severity name or number
    LevelGate         — threshold holder and enabled check
    FormattedMessage  — formatting result (message, args, error)
    array_format      — structured formatting
    format_message    — formatting to a display string
    LogContext        — gate + optional host + stream
    BridgeLogger      — the logger object
    PlaceholderLogger — logger interface plugin code uses
    HostLog           — host build tool logger interface
    traced            — function tracing decorator
"""

from .levels import Severity, parse_severity
from .gate import LevelGate
from .formatter import FormattedMessage, array_format, format_message, format_error
from .interfaces import PlaceholderLogger, HostLog
from .manager import LogContext, BridgeLogger
from .trace import traced

__all__ = [
    'Severity', 'parse_severity',
    'LevelGate',
    'FormattedMessage', 'array_format', 'format_message', 'format_error',
    'PlaceholderLogger', 'HostLog',
    'LogContext', 'BridgeLogger',
    'traced',
]
