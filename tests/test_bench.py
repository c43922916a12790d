import time

from gentest.bench import BenchResult, median, run_bench, run_epoch
from gentest.case import Assertion, Case, current_context
from gentest.options import BenchConfig


def test_median_odd_and_even():
    assert median([3.0, 1.0, 2.0]) == 2.0
    assert median([4.0, 1.0, 3.0, 2.0]) == 2.5


def test_median_empty_and_input_untouched():
    values = [5.0, 1.0]
    assert median([]) == 0.0
    median(values)
    assert values == [5.0, 1.0]


def test_run_epoch_counts_calls():
    calls = []
    case = Case("b", lambda ctx: calls.append(ctx))
    result = run_epoch(case, "ctx", 5)
    assert result.iterations_done == 5
    assert calls == ["ctx"] * 5
    assert result.assertion_failed is False
    assert result.elapsed_s >= 0.0


def test_run_epoch_stops_on_assertion():
    calls = []

    def fn(ctx):
        calls.append(1)
        if len(calls) == 3:
            raise Assertion()

    result = run_epoch(Case("b", fn), None, 10)
    assert result.assertion_failed is True
    assert result.iterations_done == 2
    assert len(calls) == 3


def test_run_epoch_ignores_other_exceptions():
    def fn(ctx):
        raise RuntimeError("ignored")

    result = run_epoch(Case("b", fn), None, 4)
    assert result.iterations_done == 4
    assert result.assertion_failed is False


def test_run_epoch_sets_context():
    seen = []
    case = Case("bench/name", lambda ctx: seen.append(current_context().display_name))
    run_epoch(case, None, 2)
    assert seen == ["bench/name", "bench/name"]
    assert current_context() is None


def test_run_bench_epoch_counts():
    calls = []
    case = Case("b", lambda ctx: calls.append(1))
    cfg = BenchConfig(min_epoch_time_s=0.0, max_total_time_s=100.0, warmup_epochs=2, measure_epochs=3)
    result = run_bench(case, None, cfg)
    assert result.epochs == 3
    assert result.iters_per_epoch == 1
    assert len(calls) == 1 + 2 + 3
    assert result.best_ns <= result.median_ns
    assert result.best_ns <= result.mean_ns


def test_run_bench_stops_at_total_time():
    case = Case("b", lambda ctx: None)
    cfg = BenchConfig(min_epoch_time_s=0.0, max_total_time_s=-1.0, warmup_epochs=0, measure_epochs=10)
    result = run_bench(case, None, cfg)
    assert result.epochs == 1


def test_run_bench_calibrates_to_power_of_two():
    case = Case("b", lambda ctx: time.sleep(0.001))
    cfg = BenchConfig(min_epoch_time_s=0.005, max_total_time_s=100.0, warmup_epochs=0, measure_epochs=1)
    result = run_bench(case, None, cfg)
    assert result.iters_per_epoch >= 2
    assert result.iters_per_epoch & (result.iters_per_epoch - 1) == 0


def test_bench_result_defaults():
    result = BenchResult()
    assert (result.epochs, result.iters_per_epoch, result.mean_ns) == (0, 0, 0.0)