"""
Run a batch of independent blocking calls side by side.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


def gather(
    func: Callable[[T], R],
    items: Sequence[T],
    max_workers: Optional[int] = None
) -> List[R]:
    """
    Call ``func`` on every item concurrently and collect the results.

    All calls are submitted before any result is read, and every call runs
    to completion even if a sibling fails. Results come back in the order
    of ``items``, not completion order.

    Args:
        func: Function applied to each item
        items: Inputs, one call each
        max_workers: Thread count (default: one per item)

    Returns:
        List of results, positionally matching ``items``

    Raises:
        The first exception raised by any call, in ``items`` order
    """
    if not items:
        return []

    with ThreadPoolExecutor(max_workers=max_workers or len(items)) as executor:
        futures = [executor.submit(func, item) for item in items]

    failures = [future.exception() for future in futures if future.exception() is not None]
    if failures:
        logger.debug(f"{len(failures)} of {len(futures)} tasks failed")
        raise failures[0]

    return [future.result() for future in futures]
