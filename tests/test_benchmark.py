import io
from unittest import mock

import pytest

from apeiron.benchmark import Benchmark
from apeiron.timer import TimerError, TimeUnit


def timed(benchmark, name, start_ns, stop_ns):
    with mock.patch("time.perf_counter_ns", side_effect=[start_ns, stop_ns]):
        benchmark.start_timer(name)
        benchmark.stop_timer(name)


def bar_positions(line):
    return [index for index, char in enumerate(line) if char == "|"]


def test_stop_timer_records_lap_in_units():
    bench = Benchmark(TimeUnit.SECOND)
    timed(bench, "alpha", 0, 2_000_000)
    watch = bench.stop_watches["alpha"]
    assert watch.lap_times == [watch.total_lap_time(TimeUnit.SECOND)]
    assert watch.is_running is False


def test_start_running_timer_raises():
    bench = Benchmark()
    with mock.patch("time.perf_counter_ns", return_value=0):
        bench.start_timer("alpha")
        with pytest.raises(TimerError):
            bench.start_timer("alpha")


def test_pause_unknown_timer_raises():
    with pytest.raises(TimerError):
        Benchmark().pause_timer("missing")


def test_pause_stopped_timer_raises():
    bench = Benchmark()
    timed(bench, "alpha", 0, 10)
    with pytest.raises(TimerError):
        bench.pause_timer("alpha")


def test_resume_unknown_timer_raises():
    with pytest.raises(TimerError):
        Benchmark().resume_timer("missing")


def test_resume_running_timer_raises():
    bench = Benchmark()
    with mock.patch("time.perf_counter_ns", return_value=0):
        bench.start_timer("alpha")
        with pytest.raises(TimerError):
            bench.resume_timer("alpha")


def test_pause_and_resume_accumulate():
    bench = Benchmark(TimeUnit.NANOSECOND)
    with mock.patch("time.perf_counter_ns", side_effect=[0, 300, 1_000, 1_400]):
        bench.start_timer("alpha")
        bench.pause_timer("alpha")
        bench.resume_timer("alpha")
        bench.stop_timer("alpha")
    assert bench.stop_watches["alpha"].lap_times == [300 + 400]


def test_header_layout():
    stream = io.StringIO()
    Benchmark(stream=stream).print_results_header()
    lines = stream.getvalue().split("\n")
    assert lines[0] == ""
    assert set(lines[1]) == {"*"}
    assert lines[3] == lines[1]
    assert "Timer Name" in lines[2]
    assert "Standard Deviation" in lines[2]
    assert len(lines[2]) == len(lines[1])


def test_row_reports_statistics_aligned_with_header():
    stream = io.StringIO()
    bench = Benchmark(stream=stream)
    timed(bench, "alpha", 0, 2_500_000)
    bench.print_results("alpha", print_header=True)
    lines = stream.getvalue().rstrip("\n").split("\n")
    header, row = lines[2], lines[-1]
    assert bar_positions(header) == bar_positions(row)

    fields = row.split("|")
    watch = bench.stop_watches["alpha"]
    assert fields[0].strip() == "alpha"
    assert int(fields[1]) == 1
    assert float(fields[2]) == pytest.approx(watch.lap_time_min, rel=1e-3)
    assert float(fields[4]) == pytest.approx(watch.lap_time_mean, rel=1e-3)
    assert float(fields[6]) == pytest.approx(watch.lap_time_std, abs=1e-3)


def test_print_results_for_unknown_name_raises():
    with pytest.raises(TimerError):
        Benchmark(stream=io.StringIO()).print_results("missing")


def test_print_all_results_resets_watches():
    stream = io.StringIO()
    bench = Benchmark(stream=stream)
    timed(bench, "alpha", 0, 1_000)
    timed(bench, "beta", 0, 2_000)
    bench.print_results()
    output = stream.getvalue()
    lines = output.rstrip("\n").split("\n")
    assert set(lines[-1]) == {"*"}
    assert any(line.startswith(" alpha") for line in lines)
    assert any(line.startswith(" beta") for line in lines)
    for watch in bench.stop_watches.values():
        assert watch.is_finalised is False
        assert watch.total_lap_time(TimeUnit.NANOSECOND) == 0.0