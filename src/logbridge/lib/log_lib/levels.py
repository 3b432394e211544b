"""
Severity levels for the bridge logger.

Levels are ordered from most verbose to least verbose. The emit rule is:

    requested >= threshold  →  message is shown

Level assignments:
    ←── louder ─────────────────────── quieter ──→
    0      1      2     3     4
    trace  debug  info  warn  error

The host build tool has no trace level, so TRACE is labelled and
forwarded as DEBUG.
"""

from enum import IntEnum


class Severity(IntEnum):
    """A log message's importance level."""
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4

    @property
    def label(self) -> str:
        """Label used in output lines and for the host call."""
        if self is Severity.TRACE:
            return 'DEBUG'
        return self.name


# Accepted spellings for parse_severity(), beyond the member names
_ALIASES = {
    'warning': Severity.WARN,
    'err': Severity.ERROR,
    'fine': Severity.DEBUG,
    'finest': Severity.TRACE,
}


def parse_severity(value) -> Severity:
    """Parse a severity from a member, name, or integer.

    Names are case-insensitive ('info', 'WARN', 'warning'). Integers and
    numeric strings map to the enum values 0-4.

    Raises:
        ValueError: if the value does not name a severity
    """
    if isinstance(value, Severity):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Severity(value)
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip('-').isdigit():
            return Severity(int(text))
        key = text.lower()
        if key in _ALIASES:
            return _ALIASES[key]
        try:
            return Severity[key.upper()]
        except KeyError:
            pass
    raise ValueError(f"Unknown severity: {value!r}")
