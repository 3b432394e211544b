"""
Logging interface shapes.

PlaceholderLogger is what plugin code logs through. HostLog is the build
tool's own logger shape: four levels, a message and an optional error.
BridgeLogger implements both, so it can be handed to code expecting
either.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class PlaceholderLogger(Protocol):
    """Logger taking a {} template and positional arguments."""

    @property
    def name(self) -> str: ...

    def trace(self, msg: Any, *args: Any) -> None: ...
    def debug(self, msg: Any, *args: Any) -> None: ...
    def info(self, msg: Any, *args: Any) -> None: ...
    def warn(self, msg: Any, *args: Any) -> None: ...
    def error(self, msg: Any, *args: Any) -> None: ...

    def is_trace_enabled(self) -> bool: ...
    def is_debug_enabled(self) -> bool: ...
    def is_info_enabled(self) -> bool: ...
    def is_warn_enabled(self) -> bool: ...
    def is_error_enabled(self) -> bool: ...


@runtime_checkable
class HostLog(Protocol):
    """The host build tool's logger."""

    def debug(self, message: str, error: Optional[BaseException] = None) -> None: ...
    def info(self, message: str, error: Optional[BaseException] = None) -> None: ...
    def warn(self, message: str, error: Optional[BaseException] = None) -> None: ...
    def error(self, message: str, error: Optional[BaseException] = None) -> None: ...

    def is_debug_enabled(self) -> bool: ...
    def is_info_enabled(self) -> bool: ...
    def is_warn_enabled(self) -> bool: ...
    def is_error_enabled(self) -> bool: ...
