"""Shared data types describing parsed attributes, discovered tests and mocks."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


class FixtureLifetime(enum.Enum):
    """How long a fixture instance lives relative to the tests using it."""

    NONE = "none"
    MEMBER_EPHEMERAL = "ephemeral"
    MEMBER_SUITE = "suite"
    MEMBER_GLOBAL = "global"


@dataclass
class ParsedAttribute:
    """An attribute name with its argument strings as written in source."""

    name: str
    arguments: List[str] = field(default_factory=list)


@dataclass
class AttributeCollection:
    """Attributes of a declaration, split by namespace.

    ``gentest`` attributes are validated strictly; ``other_namespaces`` only
    keeps names so that a warning can be reported for them.
    """

    gentest: List[ParsedAttribute] = field(default_factory=list)
    other_namespaces: List[str] = field(default_factory=list)


@dataclass
class CollectorOptions:
    """Options consumed by the generator entry point."""

    entry: str = "gentest::run_all_tests"
    output_path: Optional[Path] = None
    mock_registry_path: Optional[Path] = None
    mock_impl_path: Optional[Path] = None
    template_path: Optional[Path] = None
    sources: List[str] = field(default_factory=list)
    clang_args: List[str] = field(default_factory=list)
    compilation_database: Optional[Path] = None
    check_only: bool = False


@dataclass
class TestCaseInfo:
    """Description of a discovered test function or member test."""

    __test__ = False

    qualified_name: str = ""
    display_name: str = ""
    filename: str = ""
    suite_name: str = ""
    line: int = 0
    is_benchmark: bool = False
    is_jitter: bool = False
    is_baseline: bool = False
    returns_value: bool = False
    tags: List[str] = field(default_factory=list)
    requirements: List[str] = field(default_factory=list)
    should_skip: bool = False
    skip_reason: str = ""
    fixture_qualified_name: str = ""
    fixture_lifetime: FixtureLifetime = FixtureLifetime.NONE
    template_args: List[str] = field(default_factory=list)
    call_arguments: str = ""
    free_fixtures: List[str] = field(default_factory=list)

    @property
    def is_member(self) -> bool:
        """True when this case is a member test on a fixture type."""
        return bool(self.fixture_qualified_name)


@dataclass
class MockParamInfo:
    """A parameter of a mocked member function."""

    type: str
    name: str = ""


@dataclass
class MockMethodInfo:
    """A member function suitable for mocking."""

    qualified_name: str
    method_name: str
    return_type: str
    parameters: List[MockParamInfo] = field(default_factory=list)
    template_prefix: str = ""
    template_param_names: List[str] = field(default_factory=list)
    is_const: bool = False
    is_volatile: bool = False
    is_static: bool = False
    is_virtual: bool = False
    is_pure_virtual: bool = False
    is_noexcept: bool = False
    ref_qualifier: str = ""


@dataclass
class MockClassInfo:
    """A mockable class or struct."""

    qualified_name: str
    display_name: str = ""
    derive_for_virtual: bool = False
    has_accessible_default_ctor: bool = False
    has_virtual_destructor: bool = False
    methods: List[MockMethodInfo] = field(default_factory=list)