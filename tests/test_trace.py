"""Tests for lib.log_lib.trace — the @traced decorator."""

from pathlib import Path

import pytest

from logbridge.lib.log_lib import Severity, traced


def test_disabled_passes_through(make_logger, buf):
    log = make_logger(Severity.DEBUG)

    @traced(log)
    def add(a, b):
        return a + b

    assert add(1, 2) == 3
    assert buf.getvalue() == ""


def test_entry_and_exit(make_logger, buf):
    log = make_logger(Severity.TRACE)

    @traced(log)
    def add(a, b=0):
        return a + b

    assert add(1, b=2) == 3
    lines = buf.getvalue().splitlines()
    assert lines == [
        f"[DEBUG] >> {__name__}.add(1, b=2)",
        f"[DEBUG] << {__name__}.add returned: 3",
    ]


def test_none_result_not_logged(make_logger, buf):
    log = make_logger(Severity.TRACE)

    @traced(log)
    def nothing():
        return None

    nothing()
    assert len(buf.getvalue().splitlines()) == 1


def test_exception_logged_and_reraised(make_logger, buf):
    log = make_logger(Severity.TRACE)

    @traced(log)
    def fail():
        raise KeyError("missing")

    with pytest.raises(KeyError):
        fail()
    assert f"!! {__name__}.fail raised: KeyError: 'missing'" in buf.getvalue()


def test_method_shows_self(make_logger, buf):
    log = make_logger(Severity.TRACE)

    class Resolver:
        @traced(log)
        def resolve(self, ref):
            return ref.upper()

    Resolver().resolve("head")
    assert f">> {__name__}.resolve(self, 'head')" in buf.getvalue()


def test_long_values_abbreviated(make_logger, buf):
    log = make_logger(Severity.TRACE)

    @traced(log)
    def take(text, items, path):
        return list(range(10))

    take("x" * 80, [1, 2, 3, 4], Path("pom.xml"))
    out = buf.getvalue()
    assert "'" + "x" * 47 + "...'" in out
    assert "[...4 items...]" in out
    assert "Path('pom.xml')" in out
    assert "returned: [...10 items...]" in out


def test_wraps_metadata(log):
    @traced(log)
    def documented():
        """Docstring."""

    assert documented.__name__ == "documented"
    assert documented.__doc__ == "Docstring."
