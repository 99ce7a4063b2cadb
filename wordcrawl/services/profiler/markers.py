from __future__ import annotations

from typing import Callable, FrozenSet, TypeVar

F = TypeVar("F", bound=Callable)

_PROFILED_ATTR = "__wordcrawl_profiled__"


def profiled(func: F) -> F:
    """Mark a method so that calls through a `ProfilingWrapper` are timed."""
    setattr(func, _PROFILED_ATTR, True)
    return func


def _is_profiled(member) -> bool:
    target = getattr(member, "__func__", member)
    return bool(getattr(target, _PROFILED_ATTR, False))


def profiled_method_names(cls: type) -> FrozenSet[str]:
    """Names of the methods of `cls` (inherited ones included) marked with `@profiled`."""
    names = set()
    for klass in cls.__mro__:
        for name, member in vars(klass).items():
            if _is_profiled(member):
                names.add(name)
    return frozenset(names)
