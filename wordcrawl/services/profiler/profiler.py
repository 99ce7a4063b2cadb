from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, TextIO

from wordcrawl.exceptions import NotProfiledError
from wordcrawl.utils.datetime_utils import format_rfc1123, utc_now

from .markers import profiled_method_names
from .state import ProfilingState
from .wrapper import ProfilingWrapper

logger = logging.getLogger(__name__)


class Profiler:
    """Wraps objects so calls to their `@profiled` methods are timed.

    One profiler collects timings for every object it wraps during a run and
    renders them as a report headed by the time the profiler was created.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or utc_now
        self._state = ProfilingState()
        self.start_time = self._clock()

    @property
    def state(self) -> ProfilingState:
        return self._state

    def wrap(self, delegate):
        """Return a wrapper exposing the same operations as `delegate`.

        Raises `NotProfiledError` if the type of `delegate` has no profiled
        methods, so misconfiguration shows up before any crawl starts.
        """
        if delegate is None:
            raise ValueError("delegate is required")
        names = profiled_method_names(type(delegate))
        if not names:
            raise NotProfiledError(type(delegate).__name__)
        return ProfilingWrapper(delegate, self._clock, self._state, names)

    def write_data(self, stream: TextIO) -> None:
        stream.write(f"Run at {format_rfc1123(self.start_time)}\n")
        self._state.write(stream)
        stream.write("\n")

    def write_data_to_path(self, path: str) -> None:
        """Append the report to `path`, creating the file if needed."""
        with open(path, "a", encoding="utf-8") as f:
            self.write_data(f)
        logger.info("Profile data written to %s", path)
