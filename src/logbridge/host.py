"""Host build tool binding.

Adapts a standard-library logging.Logger to the HostLog shape, and
probes a host for the most verbose level it has enabled. The probe
result becomes the bridge's threshold when nothing more specific is
configured.

Usage:
    from logbridge.host import LoggingHost, probe_threshold
    host = LoggingHost(logging.getLogger("build"))
    probe_threshold(host)   # Severity.INFO for a default logger
"""

import logging

from logbridge.lib.log_lib import Severity


class LoggingHost:
    """HostLog backed by a logging.Logger."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def _log(self, level, message, error):
        if error is not None:
            exc_info = (type(error), error, error.__traceback__)
        else:
            exc_info = None
        self.logger.log(level, message, exc_info=exc_info)

    def debug(self, message, error=None):
        self._log(logging.DEBUG, message, error)

    def info(self, message, error=None):
        self._log(logging.INFO, message, error)

    def warn(self, message, error=None):
        self._log(logging.WARNING, message, error)

    def error(self, message, error=None):
        self._log(logging.ERROR, message, error)

    def is_debug_enabled(self):
        return self.logger.isEnabledFor(logging.DEBUG)

    def is_info_enabled(self):
        return self.logger.isEnabledFor(logging.INFO)

    def is_warn_enabled(self):
        return self.logger.isEnabledFor(logging.WARNING)

    def is_error_enabled(self):
        return self.logger.isEnabledFor(logging.ERROR)


# Probe order, most verbose first. The host has no trace level.
_PROBES = (
    ('is_debug_enabled', Severity.DEBUG),
    ('is_info_enabled', Severity.INFO),
    ('is_warn_enabled', Severity.WARN),
    ('is_error_enabled', Severity.ERROR),
)


def probe_threshold(host) -> Severity:
    """Return the most verbose severity the host has enabled.

    A host with every level disabled yields ERROR, the quietest
    threshold the bridge has.
    """
    for query, severity in _PROBES:
        if getattr(host, query)():
            return severity
    return Severity.ERROR
