import asyncio
import functools
import logging
import sys
import typing as t
from concurrent import futures

import psutil

from graham_hull import args, constants, convex_hull, data, util

logger = logging.getLogger(__name__)


async def _processor(
    executor,
    queue,
    func: (),
    args_list: t.List[t.Any],
    chunksize: int = constants.DEFAULT_CHUNKSIZE,
    **kwargs: t.Dict[t.Any, t.Any]
):
    for f in executor.map(functools.partial(func, **kwargs), args_list,
                          chunksize=chunksize):
        await queue.put(f)


async def _consumer(queue, chunk_count: int):
    completed_chunks = 0
    results = [None] * chunk_count
    while completed_chunks < chunk_count:
        chunk = await queue.get()
        results[completed_chunks] = chunk
        completed_chunks += 1
    return results


class Processor:
    _executor_count: int
    _executor: futures.ProcessPoolExecutor
    _loop: asyncio.AbstractEventLoop

    def __init__(self, max_workers: t.Optional[int] = None):
        self._executor_count = max_workers or psutil.cpu_count() or 1
        self._executor = futures.ProcessPoolExecutor(
            max_workers=self._executor_count
        )
        self._loop = asyncio.new_event_loop()

    def __enter__(self) -> 'Processor':
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self._executor.shutdown()
        self._loop.close()

    def process(
        self,
        func: (),
        args_list: t.List[t.Any],
        chunksize: int = constants.DEFAULT_CHUNKSIZE,
        **kwargs: t.Dict[t.Any, t.Any],
    ) -> t.List[t.Any]:
        queue = asyncio.Queue()
        consumer = self._loop.create_task(_consumer(queue, len(args_list)))
        try:
            self._loop.run_until_complete(
                _processor(self._executor, queue, func, args_list,
                           chunksize=chunksize, **kwargs))
        except Exception:
            consumer.cancel()
            self._loop.run_until_complete(
                asyncio.gather(consumer, return_exceptions=True))
            raise
        return self._loop.run_until_complete(consumer)


def _hull(points: t.List[data.Point]) -> t.List[data.Point]:
    return convex_hull.graham_scan(points)


@util.timeit
def hull_many(
    proc: Processor,
    point_sets: t.Iterable[t.Iterable[data.PointLike]],
    chunksize: int = constants.DEFAULT_CHUNKSIZE,
) -> t.List[t.List[data.Point]]:
    """Hulls of independent point sets, in the order the sets were given."""
    args_list = [data.as_points(ps) for ps in point_sets]
    hulls = proc.process(_hull, args_list, chunksize=chunksize)
    logger.info('Computed %s hulls', len(hulls))
    return hulls


def main(argv: t.Optional[t.List[str]] = None) -> int:
    startup_args = args.parse_args(argv)
    logging.basicConfig(level=startup_args.log_level,
                        format=constants.LOG_FORMAT)
    points = startup_args.points
    if points is None:
        points = data.as_points(constants.SAMPLE_POINTS)
    logger.debug('Computing hull of %s points', len(points))
    try:
        hull = convex_hull.graham_scan(points)
    except data.EmptyInputError as e:
        logger.error('%s', e)
        return 1
    print(f'Convex Hull: {data.format_hull(hull)}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
