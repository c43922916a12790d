import json
import xml.etree.ElementTree as ET

from gentest.reports import ReportItem, render_junit, write_allure, write_junit


def _items():
    return [
        ReportItem(suite="alpha", name="alpha/ok", time_s=0.5),
        ReportItem(
            suite="alpha",
            name="alpha/bad<1>",
            time_s=0.25,
            failures=["first & worst", "second"],
            requirements=["#1", "R<2>"],
        ),
        ReportItem(suite="beta", name="beta/skip", skipped=True, skip_reason="not today"),
        ReportItem(suite="beta", name="beta/skip_plain", skipped=True),
    ]


def test_junit_header_and_counts():
    text = render_junit(_items())
    assert text.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
    root = ET.fromstring(text.split("\n", 1)[1])
    assert root.tag == "testsuite"
    assert root.get("name") == "gentest"
    assert root.get("tests") == str(len(_items()))
    assert root.get("failures") == "1"
    assert root.get("skipped") == "2"


def test_junit_testcases_round_trip():
    items = _items()
    root = ET.fromstring(render_junit(items).split("\n", 1)[1])
    cases = root.findall("testcase")
    assert [c.get("name") for c in cases] == [it.name for it in items]
    assert [c.get("classname") for c in cases] == [it.suite for it in items]
    assert [float(c.get("time")) for c in cases] == [it.time_s for it in items]


def test_junit_failures_and_properties():
    items = _items()
    root = ET.fromstring(render_junit(items).split("\n", 1)[1])
    bad = root.findall("testcase")[1]
    assert [f.text for f in bad.findall("failure")] == items[1].failures
    props = bad.find("properties").findall("property")
    assert [p.get("value") for p in props] == items[1].requirements
    assert all(p.get("name") == "requirement" for p in props)
    assert "<![CDATA[first & worst]]>" in render_junit(items)


def test_junit_skipped_message():
    root = ET.fromstring(render_junit(_items()).split("\n", 1)[1])
    cases = root.findall("testcase")
    assert cases[2].find("skipped").get("message") == "not today"
    plain = cases[3].find("skipped")
    assert plain is not None and "message" not in plain.attrib
    assert cases[0].find("skipped") is None
    assert cases[0].find("properties") is None


def test_junit_empty():
    text = render_junit([])
    assert '<testsuite name="gentest" tests="0" failures="0" skipped="0">' in text
    assert text.endswith("</testsuite>\n")


def test_write_junit_matches_render(tmp_path):
    target = tmp_path / "report.xml"
    write_junit(target, _items())
    assert target.read_text(encoding="utf-8") == render_junit(_items())


def test_write_allure(tmp_path):
    items = _items()
    out_dir = tmp_path / "allure" / "nested"
    paths = write_allure(out_dir, items)
    assert [p.name for p in paths] == [f"result-{i}-result.json" for i in range(len(items))]
    loaded = [json.loads(p.read_text(encoding="utf-8")) for p in paths]
    assert [d["status"] for d in loaded] == ["passed", "failed", "skipped", "skipped"]
    assert [d["name"] for d in loaded] == [it.name for it in items]
    assert loaded[1]["statusDetails"] == {"message": "first & worst"}
    assert "statusDetails" not in loaded[0]
    assert loaded[2]["labels"] == [{"name": "suite", "value": "beta"}]
    assert loaded[0]["time"] == 0.5


def test_status_failure_wins_over_skip():
    item = ReportItem(name="x", skipped=True, failures=["boom"])
    assert item.status == "failed"