import functools
import logging
import time

logger = logging.getLogger(__name__)


def timeit(method):
    @functools.wraps(method)
    def timed(*args, **kw):
        ts = time.time()
        result = method(*args, **kw)
        te = time.time()
        logger.debug("%s elapsed time: %f sec", method.__qualname__, (te - ts))
        return result

    return timed
