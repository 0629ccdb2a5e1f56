from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Union

from models.constants import NoOpReason


@dataclass(frozen=True)
class NoOp:
    """The status mirror needs no write."""

    reason: NoOpReason = NoOpReason.IN_SYNC


@dataclass(frozen=True)
class Correct:
    """The status mirror is stale and must be replaced with `mirror`."""

    mirror: Dict[str, Any] = field(default_factory=dict)


ReconciliationDecision = Union[NoOp, Correct]


@dataclass
class SyncReport:
    total_checked: int = 0
    updated: int = 0
    errors: int = 0
    skipped: int = 0

    def to_json(self):
        return {
            "success": True,
            "message": f"Synchronized {self.updated} dispatch statuses",
            "totalChecked": self.total_checked,
            "updated": self.updated,
            "errors": self.errors,
        }


@dataclass
class CleanupReport:
    customers_checked: int = 0
    deleted: int = 0

    def to_json(self):
        return asdict(self)


@dataclass
class CallableResult:
    success: bool
    message: str

    def to_json(self):
        return asdict(self)
