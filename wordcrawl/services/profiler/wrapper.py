from __future__ import annotations

import functools
from datetime import datetime
from typing import Callable, FrozenSet

from .state import ProfilingState


class ProfilingWrapper:
    """Forwards every attribute to `delegate`, timing calls to profiled methods.

    Durations are measured with the injected clock and recorded under the
    delegate's type name, whether the call returns or raises.
    """

    def __init__(self, delegate, clock: Callable[[], datetime], state: ProfilingState, profiled_names: FrozenSet[str]):
        self._delegate = delegate
        self._clock = clock
        self._state = state
        self._profiled_names = profiled_names

    @property
    def delegate(self):
        return self._delegate

    def __getattr__(self, name: str):
        attr = getattr(self._delegate, name)
        if name not in self._profiled_names or not callable(attr):
            return attr
        return self._timed(name, attr)

    def _timed(self, name: str, method):
        type_name = type(self._delegate).__name__

        @functools.wraps(method)
        def call(*args, **kwargs):
            start = self._clock()
            try:
                return method(*args, **kwargs)
            finally:
                self._state.record(type_name, name, self._clock() - start)

        return call

    def __eq__(self, other):
        if isinstance(other, ProfilingWrapper):
            other = other.delegate
        return self._delegate == other

    def __hash__(self):
        return hash(self._delegate)

    def __repr__(self):
        return f"<ProfilingWrapper of {self._delegate!r}>"
