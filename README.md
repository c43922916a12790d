# gentest

Building blocks for a unit-test runtime: data types that describe tests,
naming rules for parameterized and templated tests, command-line option
parsing, a per-test context for failures and logs, benchmark timing, and
JUnit XML / Allure JSON reports. There are no third-party dependencies.

## Modules

| Module | What it holds |
| --- | --- |
| `gentest.model` | `FixtureLifetime`, `ParsedAttribute`, `AttributeCollection`, `CollectorOptions`, `TestCaseInfo`, `MockParamInfo`, `MockMethodInfo`, `MockClassInfo` |
| `gentest.attr_rules` | `is_allowed_value_attribute`, `is_allowed_flag_attribute`, `is_allowed_fixture_attribute` |
| `gentest.naming` | `make_qualified`, `make_display`, `qualify_fixtures`, `derive_namespace_path`, `final_base_name`, `prefix_suite`, `NameRegistry`, `DuplicateNameError` |
| `gentest.text` | `wildcard_match`, `gha_escape`, `escape_xml` |
| `gentest.options` | `BenchConfig`, `get_arg_value`, `has_flag`, `parse_seed`, `parse_repeat`, `parse_bench_config`, `use_color`, `github_annotations_enabled` |
| `gentest.case` | `Case`, `Failure`, `Assertion`, `TestContext`, `current_context`, `active_context` |
| `gentest.bench` | `BenchResult`, `median`, `run_epoch`, `run_bench` |
| `gentest.reports` | `ReportItem`, `render_junit`, `write_junit`, `write_allure` |

## Attribute names

```python
from gentest.attr_rules import is_allowed_flag_attribute, is_allowed_value_attribute

is_allowed_flag_attribute("slow")      # True  (fast, slow, linux, windows)
is_allowed_value_attribute("owner")    # True  (owner, template, parameters, parameters_pack, fixtures)
is_allowed_flag_attribute("gpu")       # False
```

## Test names

```python
from gentest.naming import NameRegistry, make_display, make_qualified, qualify_fixtures

make_qualified("ns::add", ["int", "float"])           # 'ns::add<int, float>'
make_display("suite/add", ["int", "float"], "1, 2")   # 'suite/add<int,float>(1, 2)'
qualify_fixtures(["Db", "other::Net"], "ns::test")    # ['ns::Db', 'other::Net']

registry = NameRegistry()
registry.register("suite/add", "math.cpp:10")
registry.register("suite/add", "math.cpp:20")   # raises DuplicateNameError
```

`derive_namespace_path(["outer", "", "inner"])` gives `'outer/inner'`;
`final_base_name` and `prefix_suite` put a suite path in front of a case name.

## Wildcards and escaping

```python
from gentest.text import escape_xml, gha_escape, wildcard_match

wildcard_match("unit/math/add", "unit/*")   # True
wildcard_match("unit/math/add", "unit/?")   # False
escape_xml("a<b & c")                       # 'a&lt;b &amp; c'
gha_escape("50%\nok")                       # '50%25%0Aok'
```

## Options

The helpers in `gentest.options` read runner-style arguments from a list of
strings:

```python
from gentest.options import get_arg_value, parse_bench_config, parse_repeat, parse_seed

get_arg_value(["--filter=unit/*"], "--filter=")   # 'unit/*'
parse_repeat(["--repeat=3"])                       # 3 (1 when absent or invalid, capped at 1000000)
parse_seed(["--seed", "42"])                       # 42 (0 when absent)
parse_bench_config(["--bench-epochs=0"]).measure_epochs   # 1
```

`use_color(args, environ)` is false with `--no-color` or when `NO_COLOR` or
`GENTEST_NO_COLOR` is set; `github_annotations_enabled(args, environ)` is true
with `--github-annotations` or when `GITHUB_ACTIONS` is set.

## Test context

`active_context(name)` makes a fresh `TestContext` current for a block;
`current_context()` returns it. `TestContext.add_failure(message, file, line)`
and `TestContext.log(message)` record failures and log lines in one ordered
timeline. A test may raise `Failure` to fail with a message, or `Assertion`
to stop after a failure has been recorded.

```python
from gentest.case import active_context, current_context

with active_context("suite/add") as ctx:
    current_context().add_failure("expected 3, got 4", "math.cpp", 12)
ctx.failures   # ['expected 3, got 4']
```

## Benchmarks

```python
from gentest.bench import run_bench
from gentest.case import Case
from gentest.options import BenchConfig

case = Case(name="bench/sum", fn=lambda ctx: sum(range(100)), is_benchmark=True)
result = run_bench(case, None, BenchConfig(min_epoch_time_s=0.001, max_total_time_s=0.1))
result.epochs, result.best_ns, result.median_ns, result.mean_ns
```

`run_bench` doubles the iterations per epoch until an epoch takes at least
`min_epoch_time_s`, runs the warmup epochs, then measures up to
`measure_epochs` epochs, stopping early once `max_total_time_s` has passed.

## Reports

```python
from gentest.reports import ReportItem, render_junit, write_allure, write_junit

items = [
    ReportItem(suite="math", name="math/add", time_s=0.5),
    ReportItem(suite="math", name="math/sub", failures=["boom"]),
    ReportItem(suite="math", name="math/mul", skipped=True, skip_reason="slow"),
]
print(render_junit(items))
write_junit("report.xml", items)
write_allure("allure-results", items)   # result-0-result.json, result-1-result.json, ...
```

## What the package does not do

* It does not run tests. There is no function that takes a list of `Case`
  objects and executes them with filtering, shuffling, repetition, fail-fast
  and console output, and there is no command to start.
* It does not read source files to discover tests, and does not generate code.
* It does not expand parameter generators (ranges, linspaces, geometric or
  logarithmic series) or build Cartesian products of template and value axes.

## Development

The test suite uses pytest; install the `test` extra to get it and run
`pytest`.