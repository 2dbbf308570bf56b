import logging
from typing import Any

from heapy.indexed_heap.indexed_heap import IndexedHeap

logger = logging.getLogger(__name__)


def get_topk(heap: IndexedHeap, k: int) -> list[Any]:
    """
    Function to get the top-K elements from a heap.

    The elements are returned largest first, in the order repeated `pop`
    calls would produce them. The heap itself is left untouched: the
    elements are drained from a clone. A heap still pending reheapify is
    reheapified on the clone only.

    Parameters
    ----------
    heap : IndexedHeap
        An IndexedHeap object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    work = heap.clone()
    if work.pending:
        work.reheapify()

    k = min(k, len(work))
    logger.debug("Extracting top %d of %d elements", k, len(work))
    return [work.pop() for _ in range(k)]
