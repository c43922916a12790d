"""Which gentest attribute names are allowed in each form."""

from __future__ import annotations

ALLOWED_VALUE_ATTRIBUTES = ("owner", "template", "parameters", "parameters_pack", "fixtures")
ALLOWED_FLAG_ATTRIBUTES = ("fast", "slow", "linux", "windows")
ALLOWED_FIXTURE_ATTRIBUTES = ("fixture",)


def is_allowed_value_attribute(name: str) -> bool:
    """Return True if ``name`` is an attribute that takes values."""
    return name in ALLOWED_VALUE_ATTRIBUTES


def is_allowed_flag_attribute(name: str) -> bool:
    """Return True if ``name`` is a bare flag attribute."""
    return name in ALLOWED_FLAG_ATTRIBUTES


def is_allowed_fixture_attribute(name: str) -> bool:
    """Return True if ``name`` is a fixture attribute for classes."""
    return name in ALLOWED_FIXTURE_ATTRIBUTES