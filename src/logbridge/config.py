"""Threshold configuration for logbridge.

Layered resolution (highest priority wins):
  1. Explicit level — passed by the caller at startup
  2. Environment — LOGBRIDGE_LEVEL (e.g. "debug", "warn", "0")
  3. Host probe — the most verbose level the bound host has enabled
  4. Default — INFO

There are no config files. The result is computed once, when the
LogContext is built, and never changes afterwards.
"""

import os
import sys

from logbridge.host import probe_threshold
from logbridge.lib.log_lib import Severity, parse_severity

ENV_LEVEL = "LOGBRIDGE_LEVEL"
DEFAULT_LEVEL = Severity.INFO


def level_from_env(environ=None):
    """Read the threshold from the environment.

    Returns None when the variable is unset, empty, or not a severity.
    Bad values are reported on stderr and otherwise ignored.
    """
    env = os.environ if environ is None else environ
    raw = env.get(ENV_LEVEL, "").strip()
    if not raw:
        return None
    try:
        return parse_severity(raw)
    except ValueError:
        print(f"logbridge: ignoring {ENV_LEVEL}={raw!r} (not a severity)",
              file=sys.stderr)
        return None


def resolve_threshold(level=None, host=None, environ=None):
    """Resolve the output threshold using layered precedence.

    Args:
        level: Explicit severity (member, name or number); wins if given
        host: Bound HostLog to probe when nothing else is configured
        environ: Mapping used instead of os.environ (for tests)

    Returns:
        The resolved Severity

    Raises:
        ValueError: if an explicit level is not a severity
    """
    # Layer 1: explicit
    if level is not None:
        return parse_severity(level)

    # Layer 2: environment
    env_level = level_from_env(environ)
    if env_level is not None:
        return env_level

    # Layer 3: host probe
    if host is not None:
        return probe_threshold(host)

    return DEFAULT_LEVEL
