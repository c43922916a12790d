"""JUnit XML and Allure JSON reports for recorded test results."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from gentest.text import escape_xml

PathLike = Union[str, Path]


@dataclass
class ReportItem:
    """The recorded outcome of one executed (or skipped) test."""

    suite: str = ""
    name: str = ""
    time_s: float = 0.0
    skipped: bool = False
    skip_reason: str = ""
    failures: List[str] = field(default_factory=list)
    logs: List[str] = field(default_factory=list)
    timeline: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    requirements: List[str] = field(default_factory=list)

    @property
    def status(self) -> str:
        """``failed``, ``skipped`` or ``passed``, failures taking precedence."""
        if self.failures:
            return "failed"
        return "skipped" if self.skipped else "passed"


def _format_time(seconds: float) -> str:
    return "%g" % seconds


def _junit_lines(items: Sequence[ReportItem]) -> Iterable[str]:
    total_fail = sum(1 for it in items if it.failures)
    total_skip = sum(1 for it in items if it.skipped)
    yield '<?xml version="1.0" encoding="UTF-8"?>\n'
    yield (
        f'<testsuite name="gentest" tests="{len(items)}" '
        f'failures="{total_fail}" skipped="{total_skip}">\n'
    )
    for it in items:
        yield (
            f'  <testcase classname="{escape_xml(it.suite)}" '
            f'name="{escape_xml(it.name)}" time="{_format_time(it.time_s)}">\n'
        )
        if it.requirements:
            yield "    <properties>\n"
            for req in it.requirements:
                yield f'      <property name="requirement" value="{escape_xml(req)}"/>\n'
            yield "    </properties>\n"
        if it.skipped:
            message = f' message="{escape_xml(it.skip_reason)}"' if it.skip_reason else ""
            yield f"    <skipped{message}/>\n"
        for failure in it.failures:
            yield f"    <failure><![CDATA[{failure}]]></failure>\n"
        yield "  </testcase>\n"
    yield "</testsuite>\n"


def render_junit(items: Sequence[ReportItem]) -> str:
    """Render ``items`` as a JUnit XML document."""
    return "".join(_junit_lines(list(items)))


def write_junit(path: PathLike, items: Sequence[ReportItem]) -> None:
    """Write the JUnit XML report for ``items`` to ``path``."""
    Path(path).write_bytes(render_junit(items).encode("utf-8"))


def _allure_object(item: ReportItem) -> dict:
    obj = {
        "name": item.name,
        "status": item.status,
        "time": item.time_s,
        "labels": [{"name": "suite", "value": item.suite}],
    }
    if item.failures:
        obj["statusDetails"] = {"message": item.failures[0]}
    return obj


def write_allure(directory: PathLike, items: Sequence[ReportItem]) -> List[Path]:
    """Write one Allure result JSON file per item into ``directory``.

    Returns the paths written, in item order.
    """
    root = Path(directory)
    root.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for idx, item in enumerate(items):
        target = root / f"result-{idx}-result.json"
        target.write_bytes(
            json.dumps(_allure_object(item), separators=(",", ":")).encode("utf-8")
        )
        written.append(target)
    return written