import logging
import operator
from typing import Dict, Iterable, Iterator, Optional, SupportsIndex, Union

from sortedcontainers import SortedSet

from .base import (
    DEFAULT_CONFIG,
    EventKind,
    MexConfig,
    MexError,
    MexEvent,
    MexKind,
    MexRangeError,
    MexRemovalError,
    MexStats,
)
from .utils import PresenceVector, as_value


logger = logging.getLogger(__name__)


def _check_size(size: SupportsIndex, name: str) -> int:
    size = operator.index(size)
    if size < 0:
        raise MexRangeError(f"{name} must be non-negative, got {size}", "SIZE_NEGATIVE")
    return size


class _MultiplicityMex:
    """Shared bookkeeping for the variants that support removal.

    ``counts`` maps each present value to its multiplicity (absent values have
    no key at all) and ``complement`` holds the tracked values that are
    absent, so the mex is its first element.
    """
    kind: MexKind

    def __init__(self, complement: Iterable[int], config: Optional[MexConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.counts: Dict[int, int] = {}
        self.complement = SortedSet(complement)
        self.processed = 0

    def add(self, value: SupportsIndex):
        """Insert one occurrence of ``value``."""
        value = self._check_value(value)
        self.counts[value] = self.counts.get(value, 0) + 1
        self.complement.discard(value)
        self._after_operation()

    def remove(self, value: SupportsIndex):
        """Remove one occurrence of ``value``.

        Removing a value that is not present does nothing unless the
        configuration asks for strict removals.
        """
        value = self._check_value(value)
        count = self.counts.get(value)
        if count is None:
            if self.config.strict_remove:
                logger.debug(f"Rejected removal of absent value {value}")
                raise MexRemovalError(f"Value {value} is not present", "VALUE_NOT_PRESENT")
        elif count == 1:
            del self.counts[value]
            self._release(value)
        else:
            self.counts[value] = count - 1
        self._after_operation()

    def mex(self) -> int:
        return self.complement[0]

    def count(self, value: SupportsIndex) -> int:
        return self.counts.get(as_value(value), 0)

    def stats(self) -> MexStats:
        return MexStats(
            kind=self.kind,
            processed=self.processed,
            distinct=len(self.counts),
            mex=self.mex(),
            complement_size=len(self.complement)
        )

    def _check_value(self, value: SupportsIndex) -> int:
        return as_value(value)

    def _release(self, value: int):
        self.complement.add(value)

    def _after_operation(self):
        self.processed += 1

    def __contains__(self, value: SupportsIndex) -> bool:
        return as_value(value) in self.counts

    def __len__(self) -> int:
        return len(self.counts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mex={self.mex()}, processed={self.processed})"


class UnboundedMex(_MultiplicityMex):
    """Mex over an unknown number of operations and arbitrarily large values."""
    kind = MexKind.UNBOUNDED

    def __init__(self, config: Optional[MexConfig] = None):
        super().__init__([0], config)
        logger.debug("Created unbounded mex tracker")

    def _after_operation(self):
        # After k operations the mex is at most k, so offering k as a new
        # candidate keeps every absent value <= k in the complement.
        self.processed += 1
        if self.processed not in self.counts:
            self.complement.add(self.processed)


class BoundedMex(_MultiplicityMex):
    """Mex over at most ``n_queries`` operations, complement built up front.

    Values ``>= n_queries`` are counted but never enter the complement, so
    the reported mex is capped at ``n_queries``. With
    ``MexConfig(strict_bounds=True)`` such values, and any operation beyond
    ``n_queries``, raise :class:`MexRangeError` instead.
    """
    kind = MexKind.BOUNDED

    def __init__(self, n_queries: SupportsIndex, config: Optional[MexConfig] = None):
        n_queries = _check_size(n_queries, "n_queries")
        super().__init__(range(n_queries), config)
        self.n_queries = n_queries
        logger.debug(f"Created bounded mex tracker for {n_queries} queries")

    def mex(self) -> int:
        if not self.complement:
            return self.n_queries
        return self.complement[0]

    def _check_value(self, value: SupportsIndex) -> int:
        value = as_value(value)
        if self.config.strict_bounds:
            if value >= self.n_queries:
                logger.debug(f"Rejected value {value} outside [0, {self.n_queries})")
                raise MexRangeError(
                    f"Value {value} outside tracked range [0, {self.n_queries})",
                    "VALUE_OUT_OF_RANGE"
                )
            if self.processed >= self.n_queries:
                logger.debug(f"Rejected operation past the limit of {self.n_queries}")
                raise MexRangeError(
                    f"Declared limit of {self.n_queries} operations exceeded",
                    "QUERY_LIMIT_EXCEEDED"
                )
        return value

    def _release(self, value: int):
        if value < self.n_queries:
            self.complement.add(value)


class InsertOnlyMex:
    """Mex for insert-only workloads over the universe ``[0, n]``.

    ``cursor`` is the current mex. It only moves forward, and only when the
    inserted element sits exactly on it, so the total scanning work over a
    whole run is bounded by ``n``.
    """
    kind = MexKind.INSERT_ONLY

    def __init__(self, n: SupportsIndex, config: Optional[MexConfig] = None):
        self.n = _check_size(n, "n")
        self.config = config or DEFAULT_CONFIG
        # one spare slot so the cursor always has a next candidate
        self.presence = PresenceVector(self.n + 1)
        self.cursor = 0
        self.processed = 0
        self._distinct = 0
        logger.debug(f"Created insert-only mex tracker for universe [0, {self.n}]")

    def add(self, element: SupportsIndex):
        element = as_value(element)
        if element > self.n:
            logger.debug(f"Rejected element {element} outside [0, {self.n}]")
            raise MexRangeError(
                f"Element {element} outside universe [0, {self.n}]",
                "VALUE_OUT_OF_RANGE"
            )

        if not self.presence.get(element):
            self._distinct += 1
            self.presence.set(element)
        self.processed += 1

        if element == self.cursor:
            while self.presence.get(self.cursor):
                self.cursor += 1

    def mex(self) -> int:
        return self.cursor

    def count(self, element: SupportsIndex) -> int:
        return int(self.presence.get(as_value(element)))

    def stats(self) -> MexStats:
        return MexStats(
            kind=self.kind,
            processed=self.processed,
            distinct=self._distinct,
            mex=self.cursor
        )

    def __contains__(self, element: SupportsIndex) -> bool:
        return self.presence.get(as_value(element))

    def __len__(self) -> int:
        return self._distinct

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mex={self.cursor}, processed={self.processed})"


MexTracker = Union[UnboundedMex, BoundedMex, InsertOnlyMex]


def replay(tracker: MexTracker, events: Iterable[MexEvent]) -> Iterator[int]:
    """Apply ``events`` in order, yielding the mex after each one."""
    for event in events:
        if event.kind is EventKind.ADD:
            tracker.add(event.value)
        elif isinstance(tracker, InsertOnlyMex):
            raise MexError(
                f"{type(tracker).__name__} does not support removals",
                "REMOVAL_UNSUPPORTED"
            )
        else:
            tracker.remove(event.value)
        yield tracker.mex()
