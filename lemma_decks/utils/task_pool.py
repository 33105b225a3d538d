"""Bounded-concurrency task pool."""

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


def run_bounded(
    items: Iterable[T],
    func: Callable[[int, T], R],
    max_workers: int,
    on_done: Callable[[int, T, R | None, BaseException | None], None] | None = None,
) -> list[R | None]:
    """Run ``func(index, item)`` for every item on a fixed number of threads.

    Workers drain a shared queue, so at most ``max_workers`` calls are in
    flight at any time. Exceptions raised by ``func`` do not stop the
    remaining items; they are passed to ``on_done`` and the slot's result
    is None.

    Args:
        items: Work items
        func: Callable receiving the item's position and the item
        max_workers: Upper bound on concurrent calls
        on_done: Optional callback ``(index, item, result, error)`` invoked
            on the calling thread as each item finishes

    Returns:
        Results in input order (None where ``func`` raised)
    """
    work = list(items)
    results: list[R | None] = [None] * len(work)
    if not work:
        return results

    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as executor:
        future_to_index = {
            executor.submit(func, index, item): index for index, item in enumerate(work)
        }

        for future in as_completed(future_to_index):
            index = future_to_index[future]
            error = future.exception()
            if error is None:
                results[index] = future.result()
            if on_done:
                on_done(index, work[index], results[index], error)

    return results
