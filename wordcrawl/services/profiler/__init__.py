from .markers import profiled, profiled_method_names
from .profiler import Profiler
from .state import ProfilingState
from .wrapper import ProfilingWrapper

__all__ = ["profiled", "profiled_method_names", "Profiler", "ProfilingState", "ProfilingWrapper"]
