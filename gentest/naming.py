"""Naming rules for discovered tests: qualified calls, display names and suites."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence


class DuplicateNameError(ValueError):
    """A test base name was declared twice in the same binary."""

    def __init__(self, name: str, location: str, previous: str) -> None:
        super().__init__(
            f"duplicate test name '{name}' at {location} (previously declared at {previous})"
        )
        self.name = name
        self.location = location
        self.previous = previous


class NameRegistry:
    """Remembers where each final base name was first declared."""

    def __init__(self) -> None:
        self._locations: Dict[str, str] = {}

    def register(self, name: str, location: str) -> None:
        """Record ``name`` at ``location``; raise DuplicateNameError if already known."""
        previous = self._locations.get(name)
        if previous is not None:
            raise DuplicateNameError(name, location, previous)
        self._locations[name] = location

    def location_of(self, name: str) -> Optional[str]:
        """Where ``name`` was first registered, or None."""
        return self._locations.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._locations

    def __len__(self) -> int:
        return len(self._locations)


def make_qualified(qualified: str, template_args: Sequence[str]) -> str:
    """The callable name, with template arguments appended as ``<A, B>``."""
    if not template_args:
        return qualified
    return f"{qualified}<{', '.join(template_args)}>"


def make_display(base: str, template_args: Sequence[str], call_args: str) -> str:
    """The display name: ``base<A,B>(args)``, omitting empty parts."""
    name = base
    if template_args:
        name += f"<{','.join(template_args)}>"
    if call_args:
        name += f"({call_args})"
    return name


def _enclosing_scope(qualified_name: str) -> str:
    head, sep, _ = qualified_name.rpartition("::")
    return head if sep else ""


def qualify_fixtures(fixture_types: Iterable[str], qualified_name: str) -> List[str]:
    """Qualify unqualified fixture type names with the test's enclosing scope."""
    scope = _enclosing_scope(qualified_name)
    result: List[str] = []
    for type_name in fixture_types:
        if "::" in type_name or not scope:
            result.append(type_name)
        else:
            result.append(f"{scope}::{type_name}")
    return result


def derive_namespace_path(namespaces: Iterable[str]) -> str:
    """Join namespace names, outermost first, with '/'; anonymous (empty) ones are skipped."""
    return "/".join(ns for ns in namespaces if ns)


def final_base_name(suite_path: str, case_name: str) -> str:
    """The unique base name of a test: ``suite/case`` or just ``case``."""
    return f"{suite_path}/{case_name}" if suite_path else case_name


def prefix_suite(suite: Optional[str], display_name: str) -> str:
    """Prefix ``display_name`` with ``suite/`` unless it already starts with it."""
    if suite is None:
        return display_name
    prefix = f"{suite}/"
    if display_name.startswith(prefix):
        return display_name
    return prefix + display_name