"""Tests for logbridge._version — PEP 440 compliance and version parsing."""

import re

import logbridge
from logbridge._version import (
    MAJOR, MINOR, PATCH, PHASE,
    PIP_VERSION,
    VERSION,
    __app_name__,
    get_pip_version,
    get_version,
)


def test_version_format():
    """Version should be MAJOR.MINOR.PATCH[-PHASE]."""
    assert re.match(r"^\d+\.\d+\.\d+(-\w+)?$", get_version())


def test_version_matches_components():
    assert get_version().startswith(f"{MAJOR}.{MINOR}.{PATCH}")


def test_pip_version_is_pep440():
    """PIP_VERSION should be PEP 440 compliant."""
    assert re.match(r"^\d+\.\d+\.\d+((a|b|rc)\d+)?$", get_pip_version())


def test_alpha_maps_to_a0():
    if PHASE == "alpha":
        assert PIP_VERSION.endswith("a0")


def test_package_exports_version():
    assert logbridge.__version__ == VERSION
    assert __app_name__ == "logbridge"
