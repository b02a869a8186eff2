from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class MexKind(Enum):
    """Workload shapes served by the tracker variants."""
    UNBOUNDED = "unbounded"
    BOUNDED = "bounded"
    INSERT_ONLY = "insert_only"


class EventKind(Enum):
    ADD = "add"
    REMOVE = "remove"


class MexError(Exception):
    """Base error for the package; ``code`` is a short machine-readable tag."""

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.code = code

    def __str__(self) -> str:
        return f"{self.code}: {self.args[0]}"


class MexRangeError(MexError, IndexError):
    """A value or operation count falls outside the declared bounds."""


class MexRemovalError(MexError, KeyError):
    """Strict removal of a value that is not present."""


@dataclass(frozen=True)
class MexConfig:
    """Policy switches shared by all variants."""
    # raise MexRemovalError instead of ignoring removal of an absent value
    strict_remove: bool = False
    # BoundedMex: reject values >= n_queries and operations past n_queries
    strict_bounds: bool = False


DEFAULT_CONFIG = MexConfig()


@dataclass(frozen=True)
class MexEvent:
    """A single insert or delete fed to a tracker."""
    kind: EventKind
    value: int

    @classmethod
    def add(cls, value: int) -> "MexEvent":
        return cls(EventKind.ADD, value)

    @classmethod
    def remove(cls, value: int) -> "MexEvent":
        return cls(EventKind.REMOVE, value)


@dataclass
class MexStats:
    """Snapshot of a tracker's counters."""
    kind: MexKind
    processed: int
    distinct: int
    mex: int
    complement_size: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "processed": self.processed,
            "distinct": self.distinct,
            "mex": self.mex,
            "complement_size": self.complement_size
        }
