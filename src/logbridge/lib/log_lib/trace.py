"""
Function tracing decorator.

Logs entry, exit and exceptions of the wrapped function through a bridge
logger at TRACE. When trace is disabled the call goes straight through
and no argument formatting is done.
"""

import functools
import inspect
from pathlib import Path

_MAX_STR = 50
_MAX_ITEMS = 3


def _short_repr(value):
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > _MAX_STR:
        return f"'{value[:_MAX_STR - 3]}...'"
    if isinstance(value, (list, tuple)) and len(value) > _MAX_ITEMS:
        return f"[...{len(value)} items...]"
    return repr(value)


def _describe_args(func, args, kwargs):
    parts = []
    try:
        params = list(inspect.signature(func).parameters)
    except (TypeError, ValueError):
        params = []
    if args and params and params[0] in ('self', 'cls'):
        parts.append(params[0])
        args = args[1:]
    parts.extend(_short_repr(a) for a in args)
    parts.extend(f"{k}={_short_repr(v)}" for k, v in kwargs.items())
    return ', '.join(parts)


def traced(logger):
    """Decorator factory: trace calls to the wrapped function on logger.

    Usage::

        @traced(log)
        def resolve(ref): ...
    """
    def decorator(func):
        module = inspect.getmodule(func)
        qualname = f"{module.__name__ if module else 'unknown'}.{func.__name__}"

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not logger.is_trace_enabled():
                return func(*args, **kwargs)

            logger.trace(">> {}({})", qualname, _describe_args(func, args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.trace("!! {} raised: {}: {}", qualname, type(e).__name__, e)
                raise
            if result is not None:
                logger.trace("<< {} returned: {}", qualname, _short_repr(result))
            return result

        return wrapper
    return decorator
