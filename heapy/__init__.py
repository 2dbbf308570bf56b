from heapy.indexed_heap.errors import (
    CapacityExceeded,
    EmptyPop,
    HeapError,
    IdentityTrackingDisabled,
    OutOfRangeIndex,
    StaleReheapify,
)
from heapy.indexed_heap.indexed_heap import IndexedHeap
from heapy.indexed_heap.topk import get_topk
