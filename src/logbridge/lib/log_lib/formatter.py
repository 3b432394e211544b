"""
Placeholder message formatting.

Templates use ``{}`` as the positional placeholder:

    format_message("{} of {} done", [3, 10])   →  "3 of 10 done"

Rules:
    - placeholders are filled left to right with str() of each argument
    - placeholders without an argument stay verbatim
    - arguments without a placeholder are dropped from the message
    - a trailing exception that no placeholder consumed is not dropped:
      it is kept as the message's error and rendered after it
    - ``\\{}`` is a literal ``{}``; ``\\\\{}`` is a backslash followed by
      a substituted value

Formatting never raises. The logging call site must not fail because of
a bad template or an argument with a broken ``__str__``.
"""

import sys
import traceback
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Tuple

DELIM = '{}'
ESCAPE = '\\'


@dataclass(frozen=True)
class FormattedMessage:
    """Result of formatting one log call.

    Attributes:
        message: Template with placeholders substituted
        args: The arguments as passed in
        error: Trailing exception that was not substituted, if any
    """
    message: str
    args: Tuple[Any, ...] = field(default_factory=tuple)
    error: Optional[BaseException] = None

    def render(self) -> str:
        """Message followed by the error's traceback, if there is one."""
        if self.error is None:
            return self.message
        return f"{self.message}\n{format_error(self.error)}"


def safe_str(obj: Any) -> str:
    """str() that cannot raise."""
    try:
        return str(obj)
    except Exception as e:
        print(f"logbridge: str() failed on {type(obj).__name__}: {e!r}",
              file=sys.stderr)
        return f"[FAILED str() on {type(obj).__name__}]"


def format_error(error: BaseException) -> str:
    """Traceback text for an exception, without the trailing newline.

    Exceptions that were never raised have no traceback and render as
    ``Type: message`` only.
    """
    try:
        lines = traceback.format_exception(type(error), error, error.__traceback__)
        return ''.join(lines).rstrip('\n')
    except Exception:
        return f"{type(error).__name__}: {safe_str(error)}"


def _template_text(template: Any) -> str:
    if isinstance(template, str):
        return template
    if isinstance(template, BaseException):
        return ''.join(traceback.format_exception_only(type(template), template)).strip()
    return safe_str(template)


def _substitute(pattern: str, args: Sequence[Any]) -> Tuple[str, int]:
    """Fill placeholders in pattern. Returns (text, number of args consumed)."""
    out = []
    i = 0
    used = 0
    while used < len(args):
        j = pattern.find(DELIM, i)
        if j == -1:
            break
        if j >= 1 and pattern[j - 1] == ESCAPE:
            if j >= 2 and pattern[j - 2] == ESCAPE:
                # Escaped backslash: keep one, substitute normally
                out.append(pattern[i:j - 1])
                out.append(safe_str(args[used]))
                used += 1
                i = j + 2
            else:
                # Escaped placeholder: emit '{' and let '}' follow as text
                out.append(pattern[i:j - 1])
                out.append('{')
                i = j + 1
        else:
            out.append(pattern[i:j])
            out.append(safe_str(args[used]))
            used += 1
            i = j + 2
    out.append(pattern[i:])
    return ''.join(out), used


def array_format(template: Any, args: Sequence[Any] = ()) -> FormattedMessage:
    """Format template with args, extracting an unconsumed trailing exception."""
    args = tuple(args)
    try:
        pattern = _template_text(template)
        if not args:
            return FormattedMessage(pattern)
        text, used = _substitute(pattern, args)
        error = None
        if used < len(args) and isinstance(args[-1], BaseException):
            error = args[-1]
        return FormattedMessage(text, args, error)
    except Exception:
        literal = ' '.join(safe_str(part) for part in (template,) + args)
        return FormattedMessage(literal, args)


def format_message(template: Any, args: Sequence[Any] = ()) -> str:
    """Format template with args into a single display string.

    Args:
        template: Message template, usually a str with {} placeholders
        args: Substitution values; a trailing exception is appended

    Returns:
        The formatted message, with the trailing error's traceback
        appended when present
    """
    return array_format(template, args).render()
