"""Optional cProfile instrumentation of the pairsim entry point.

When the PAIRSIM_PROFILE environment variable names a directory, each run
writes its statistics to {PAIRSIM_PROFILE}/{timestamp_ms}_{pid}/main_{pid}_{seq}.prof.
"""
import cProfile
import functools
import itertools
import os
import time
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

P = ParamSpec('P')
T = TypeVar('T')

PROFILE_ENV = 'PAIRSIM_PROFILE'

_profile_counter = itertools.count()


def get_profile_dir() -> Path | None:
    """Directory for this run's profile data, or None when profiling is off."""
    profile_path = os.environ.get(PROFILE_ENV)
    if not profile_path:
        return None
    return Path(profile_path) / f"{int(time.time() * 1000)}_{os.getpid()}"


def generate_profile_filename(prefix: str = "profile") -> str:
    """Unique file name within the process, e.g. "main_54398_0.prof"."""
    return f"{prefix}_{os.getpid()}_{next(_profile_counter)}.prof"


def profile_main(func: Callable[P, T]) -> Callable[P, T]:
    """Profile the decorated entry point when PAIRSIM_PROFILE is set."""
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        profile_dir = get_profile_dir()
        if profile_dir is None:
            return func(*args, **kwargs)

        profile_dir.mkdir(parents=True, exist_ok=True)
        profile_file = profile_dir / generate_profile_filename("main")

        profiler = cProfile.Profile()
        try:
            profiler.enable()
            return func(*args, **kwargs)
        finally:
            profiler.disable()
            profiler.dump_stats(str(profile_file))

    return wrapper
