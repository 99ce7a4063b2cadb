import io
from datetime import datetime, timedelta, timezone

import pytest

from wordcrawl.exceptions import NotProfiledError
from wordcrawl.services.profiler import Profiler, ProfilingState, profiled, profiled_method_names


class Greeter:
    def __init__(self, clock=None, cost=timedelta(0)):
        self.clock = clock
        self.cost = cost
        self.name = "greeter"

    @profiled
    def greet(self, who):
        if self.clock is not None:
            self.clock.advance(self.cost)
        return f"hello {who}"

    @profiled
    def fail(self):
        if self.clock is not None:
            self.clock.advance(self.cost)
        raise ValueError("nope")

    def untimed(self):
        return "plain"


class LoudGreeter(Greeter):
    pass


def _report(state):
    out = io.StringIO()
    state.write(out)
    return out.getvalue().splitlines()


class Plain:
    def run(self):
        return 1


def test_profiled_method_names_include_inherited():
    assert profiled_method_names(LoudGreeter) == frozenset({"greet", "fail"})
    assert profiled_method_names(Plain) == frozenset()


def test_wrap_rejects_type_without_profiled_methods(fake_clock):
    with pytest.raises(NotProfiledError, match="Plain doesn't have profiled methods"):
        Profiler(fake_clock).wrap(Plain())


def test_wrapper_forwards_calls_and_attributes(fake_clock):
    wrapped = Profiler(fake_clock).wrap(Greeter())

    assert wrapped.greet("bob") == "hello bob"
    assert wrapped.untimed() == "plain"
    assert wrapped.name == "greeter"


def test_records_duration_of_profiled_calls(fake_clock):
    profiler = Profiler(fake_clock)
    wrapped = profiler.wrap(Greeter(fake_clock, cost=timedelta(milliseconds=250)))

    wrapped.greet("a")
    wrapped.greet("b")
    wrapped.untimed()

    assert _report(profiler.state) == ["Greeter#greet took 0m 0s 500ms"]


def test_records_duration_when_call_raises(fake_clock):
    profiler = Profiler(fake_clock)
    wrapped = profiler.wrap(Greeter(fake_clock, cost=timedelta(seconds=2)))

    with pytest.raises(ValueError, match="nope"):
        wrapped.fail()

    assert _report(profiler.state) == ["Greeter#fail took 0m 2s 0ms"]


def test_records_under_delegate_type_name(fake_clock):
    profiler = Profiler(fake_clock)
    profiler.wrap(LoudGreeter(fake_clock, cost=timedelta(seconds=1))).greet("x")

    assert _report(profiler.state) == ["LoudGreeter#greet took 0m 1s 0ms"]


def test_wrapper_equality_follows_delegate(fake_clock):
    greeter = Greeter()
    profiler = Profiler(fake_clock)

    assert profiler.wrap(greeter) == greeter
    assert profiler.wrap(greeter) == profiler.wrap(greeter)
    assert profiler.wrap(greeter) != Greeter()


def test_write_data_report_format(make_clock):
    clock = make_clock(start=datetime(2026, 10, 19, 8, 30, 0, tzinfo=timezone.utc))
    profiler = Profiler(clock)
    wrapped = profiler.wrap(Greeter(clock, cost=timedelta(minutes=1, seconds=2, milliseconds=345)))
    wrapped.greet("x")
    with pytest.raises(ValueError):
        wrapped.fail()

    out = io.StringIO()
    profiler.write_data(out)

    assert out.getvalue() == (
        "Run at Mon, 19 Oct 2026 08:30:00 GMT\n"
        "Greeter#fail took 1m 2s 345ms\n"
        "Greeter#greet took 1m 2s 345ms\n"
        "\n"
    )


def test_write_data_to_path_appends(tmp_path, fake_clock):
    path = tmp_path / "profile.txt"
    profiler = Profiler(fake_clock)
    profiler.wrap(Greeter()).greet("x")

    profiler.write_data_to_path(str(path))
    profiler.write_data_to_path(str(path))

    content = path.read_text(encoding="utf-8")
    assert content.count("Run at ") == 2
    assert content.count("Greeter#greet took 0m 0s 0ms") == 2


def test_state_rejects_negative_durations():
    with pytest.raises(ValueError):
        ProfilingState().record("T", "m", timedelta(seconds=-1))
