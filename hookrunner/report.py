# hookrunner/report.py
"""
Suite report model: one outcome per registered case, in order.
"""

import json
import os
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

PASSED = "passed"
FAILED = "failed"
SKIPPED = "skipped"


@dataclass(frozen=True)
class CaseOutcome:
    """
    Result of one case.

    Attributes:
        index: 1-based registration position
        description: Group label and case label
        status: passed, failed or skipped
        error: Failure message, None unless failed
        duration_sec: Time spent in the case action
    """
    index: int
    description: str
    status: str
    error: Optional[str] = None
    duration_sec: float = 0.0

    @property
    def passed(self) -> bool:
        return self.status == PASSED


@dataclass
class SuiteReport:
    """Ordered outcomes plus suite timings."""
    run_id: str
    started_at: Optional[datetime] = None
    stopped_at: Optional[datetime] = None
    duration_sec: float = 0.0
    outcomes: List[CaseOutcome] = field(default_factory=list)

    def _count(self, status: str) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    @property
    def passed(self) -> int:
        return self._count(PASSED)

    @property
    def failed(self) -> int:
        return self._count(FAILED)

    @property
    def skipped(self) -> int:
        return self._count(SKIPPED)

    @property
    def status(self) -> str:
        if self.failed or self.skipped:
            return FAILED
        return PASSED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "run_id": self.run_id,
            "status": self.status,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "stopped_at": self.stopped_at.isoformat() if self.stopped_at else None,
            "duration_sec": self.duration_sec,
            "summary": {
                "total": len(self.outcomes),
                "passed": self.passed,
                "failed": self.failed,
                "skipped": self.skipped,
            },
            "cases": [asdict(o) for o in self.outcomes],
        }

    def write_json(self, path: str) -> None:
        os.makedirs(os.path.dirname(os.path.abspath(path)) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
