"""
Dashboard Agent
----------------
Aggregates for the dashboard charts, computed from the library contents on
every call:

  - counts by status       (Draft / Reviewed / Approved)
  - counts by priority     (High / Medium / Low)
  - counts by compliance   (one bucket per standard, a case can be in several)

Usage
-----
  from agents.dashboard_agent import DashboardAgent
  stats = DashboardAgent().summarize(library.all())
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from models.test_case_model import ComplianceStandard, Priority, TestCase, TestStatus


def _chart(counts: dict) -> List[dict]:
    return [{"name": key.value, "value": value} for key, value in counts.items()]


@dataclass
class DashboardStats:
    total: int
    by_status: Dict[TestStatus, int]
    by_priority: Dict[Priority, int]
    by_compliance: Dict[ComplianceStandard, int]

    def to_dict(self) -> dict:
        return {
            "total":        self.total,
            "byStatus":     _chart(self.by_status),
            "byPriority":   _chart(self.by_priority),
            "byCompliance": _chart(self.by_compliance),
        }


class DashboardAgent:

    def summarize(self, cases: Sequence[TestCase]) -> DashboardStats:
        return DashboardStats(
            total=len(cases),
            by_status=self.count_by_status(cases),
            by_priority=self.count_by_priority(cases),
            by_compliance=self.count_by_compliance(cases),
        )

    def count_by_status(self, cases: Sequence[TestCase]) -> Dict[TestStatus, int]:
        return {s: sum(1 for tc in cases if tc.status == s) for s in TestStatus}

    def count_by_priority(self, cases: Sequence[TestCase]) -> Dict[Priority, int]:
        return {p: sum(1 for tc in cases if tc.priority == p) for p in Priority}

    def count_by_compliance(self, cases: Sequence[TestCase]) -> Dict[ComplianceStandard, int]:
        return {c: sum(1 for tc in cases if c in tc.compliance_tags) for c in ComplianceStandard}
