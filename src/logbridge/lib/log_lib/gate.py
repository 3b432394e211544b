"""Level gate: a fixed threshold and the enabled check against it."""

from .levels import Severity, parse_severity


class LevelGate:
    """Answers whether a requested severity would be emitted.

    The threshold is set once at construction and exposed read-only.
    """

    __slots__ = ('_threshold',)

    def __init__(self, threshold=Severity.INFO):
        self._threshold = parse_severity(threshold)

    @property
    def threshold(self) -> Severity:
        return self._threshold

    def is_enabled(self, requested) -> bool:
        """True when requested is at or above the threshold.

        Unrecognized values are reported as disabled rather than raising.
        """
        try:
            requested = parse_severity(requested)
        except ValueError:
            return False
        return requested >= self._threshold

    def __repr__(self):
        return f"LevelGate(threshold={self._threshold.name})"
