import cProfile
import io
import logging
import pstats
from functools import wraps
from typing import Callable

logger = logging.getLogger(__name__)

def profile(func: Callable | None = None, output_file: str | None = None, limit: int = 20):
    """
    Profile every call of the decorated function with cProfile.

    The `limit` most expensive entries (by cumulative time) are logged at INFO level.
    When output_file is given the raw stats are also dumped there, so they can be opened with snakeviz or pstats.

    Can be used bare (@profile) or with arguments (@profile(output_file="bench.prof")).
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def wrapper(*args, **kwargs):
            profiler = cProfile.Profile()
            profiler.enable()
            try:
                return f(*args, **kwargs)
            finally:
                profiler.disable()
                stream = io.StringIO()
                stats = pstats.Stats(profiler, stream=stream).sort_stats("cumulative")
                stats.print_stats(limit)
                logger.info(f"Profile of {f.__name__}:\n{stream.getvalue()}")
                if output_file:
                    stats.dump_stats(output_file)
                    logger.info(f"Profile data saved to {output_file}")
        return wrapper

    if func is None:
        return decorator
    return decorator(func)
