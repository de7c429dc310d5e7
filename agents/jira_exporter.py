"""
Jira Exporter
--------------
Pushes library test cases to Jira as issues in one bulk request.

While JIRA_BASE_URL is not configured the export is only simulated: nothing
is sent and the result is flagged `simulated`.

Uses requests. No LLM needed.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import requests

import config
from agents.errors import ExportError
from models.test_case_model import TestCase

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    exported: int
    project_key: str
    issue_keys: List[str] = field(default_factory=list)
    simulated: bool = False

    def to_dict(self) -> dict:
        return {
            "exported":   self.exported,
            "projectKey": self.project_key,
            "issueKeys":  self.issue_keys,
            "simulated":  self.simulated,
        }


class JiraExporter:

    ISSUE_TYPE = "Test"

    def __init__(
        self,
        base_url: Optional[str] = None,
        project_key: Optional[str] = None,
        token: Optional[str] = None,
        timeout: float = config.JIRA_TIMEOUT_S,
    ):
        self.base_url = (config.JIRA_BASE_URL if base_url is None else base_url).rstrip("/")
        self.project_key = project_key or config.JIRA_PROJECT_KEY
        self.token = config.JIRA_TOKEN if token is None else token
        self.timeout = timeout

    def export(self, cases: Sequence[TestCase]) -> ExportResult:
        if not cases:
            return ExportResult(exported=0, project_key=self.project_key, simulated=not self.base_url)
        if not self.base_url:
            logger.info("Jira not configured; simulated export of %d test cases to %s",
                        len(cases), self.project_key)
            return ExportResult(exported=len(cases), project_key=self.project_key, simulated=True)

        payload = {"issueUpdates": [{"fields": self._fields(tc)} for tc in cases]}
        headers = {"Authorization": f"Bearer {self.token}", "Content-Type": "application/json"}
        try:
            resp = requests.post(
                f"{self.base_url}/rest/api/2/issue/bulk",
                json=payload, headers=headers, timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Jira export failed: %s", exc)
            raise ExportError(f"Jira export failed: {exc}") from exc

        if not isinstance(data, dict):
            raise ExportError(f"Unexpected Jira response: {data!r:.200}")
        keys = [issue.get("key", "") for issue in data.get("issues") or [] if isinstance(issue, dict)]
        errors = data.get("errors") or []
        if errors:
            raise ExportError(
                f"Jira rejected {len(errors)} of {len(cases)} issues: {errors}; "
                f"created: {', '.join(keys) or 'none'}",
                keys,
            )
        logger.info("Exported %d test cases to Jira project %s", len(keys), self.project_key)
        return ExportResult(exported=len(keys), project_key=self.project_key, issue_keys=keys)

    # ── Issue body ─────────────────────────────────────────────────────────

    def _fields(self, tc: TestCase) -> dict:
        return {
            "project":     {"key": self.project_key},
            "summary":     tc.title,
            "description": self._description(tc),
            "issuetype":   {"name": self.ISSUE_TYPE},
            "priority":    {"name": tc.priority.value},
            "labels":      [t.value.replace(" ", "_") for t in tc.compliance_tags],
        }

    def _description(self, tc: TestCase) -> str:
        lines = [
            tc.description,
            "",
            f"*Preconditions:* {tc.preconditions}",
            f"*Traceability:* {tc.traceability_id or '-'}",
            "",
            "||#||Action||Expected Result||",
        ]
        lines += [f"|{s.step_number}|{s.action}|{s.expected_result}|" for s in tc.steps]
        return "\n".join(lines)
