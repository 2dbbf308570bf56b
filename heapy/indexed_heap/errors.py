class HeapError(Exception):
    """Base class for every failure reported by an IndexedHeap."""


class CapacityExceeded(HeapError, OverflowError):
    """Insertion into a heap whose length already equals its capacity."""


class EmptyPop(HeapError, RuntimeError):
    """Removal or inspection of the root of an empty heap."""


class StaleReheapify(HeapError, RuntimeError):
    """An ordered operation was attempted after `fast_push` without a
    following `reheapify`."""


class OutOfRangeIndex(HeapError, IndexError):
    """A slot index outside ``[0, len(heap))``."""


class IdentityTrackingDisabled(HeapError, TypeError):
    """A handle based operation on a heap built with
    ``track_identity=False``."""
