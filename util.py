import functools
import logging
import time

logger = logging.getLogger(__name__)


def timeit(method):
    """
    Log wall-clock and CPU time spent in the decorated call.
    """
    @functools.wraps(method)
    def timed(*args, **kw):
        wall_start, cpu_start = time.perf_counter(), time.process_time()
        result = method(*args, **kw)
        wall = time.perf_counter() - wall_start
        cpu = time.process_time() - cpu_start
        logger.debug("%s elapsed time: %f sec (cpu %f sec)",
                     method.__qualname__, wall, cpu)
        return result

    return timed
