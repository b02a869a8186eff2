from typing import Optional, SupportsIndex

from .base import (
    EventKind,
    MexConfig,
    MexError,
    MexEvent,
    MexKind,
    MexRangeError,
    MexRemovalError,
    MexStats,
)
from .engine import BoundedMex, InsertOnlyMex, MexTracker, UnboundedMex, replay
from .utils import PresenceVector


__all__ = [
    "UnboundedMex",
    "BoundedMex",
    "InsertOnlyMex",
    "MexTracker",
    "MexKind",
    "MexConfig",
    "MexStats",
    "MexEvent",
    "EventKind",
    "MexError",
    "MexRangeError",
    "MexRemovalError",
    "PresenceVector",
    "create_mex",
    "replay"
]

__version__ = "0.1.0"


def create_mex(
    n_queries: Optional[SupportsIndex] = None,
    *,
    removals: bool = True,
    config: Optional[MexConfig] = None
) -> MexTracker:
    """
    Factory picking the tracker that fits a workload.

    Args:
        n_queries: Known number of operations (or, without removals, the
                   largest value that will be inserted). ``None`` if unknown.
        removals: Whether the workload ever removes values.
        config: Optional policy switches, see :class:`MexConfig`.
    """
    if n_queries is None:
        if not removals:
            raise ValueError("An insert-only tracker needs a universe size")
        return UnboundedMex(config)

    if not removals:
        return InsertOnlyMex(n_queries, config)

    return BoundedMex(n_queries, config)
