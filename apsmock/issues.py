"""In-memory store of ACC issues, grouped by project."""

from __future__ import annotations

import copy
import threading
import time
import uuid
from dataclasses import dataclass


@dataclass
class IssueInfo:
    id: str
    project_id: str
    title: str
    description: str | None
    status: str
    created_at: int


class IssuesState:
    """Issues keyed by project id and then issue id."""

    def __init__(self) -> None:
        self._issues: dict[str, dict[str, IssueInfo]] = {}
        self._lock = threading.Lock()

    def create_issue(
        self,
        project_id: str,
        title: str,
        description: str | None = None,
    ) -> IssueInfo:
        """Create an open issue in a project with a fresh id."""
        issue = IssueInfo(
            id=str(uuid.uuid4()),
            project_id=project_id,
            title=title,
            description=description,
            status="open",
            created_at=int(time.time() * 1000),
        )
        with self._lock:
            self._issues.setdefault(project_id, {})[issue.id] = issue
        return copy.copy(issue)

    def get_issue(self, project_id: str, issue_id: str) -> IssueInfo | None:
        """Return a copy of the issue, or None."""
        with self._lock:
            issue = self._issues.get(project_id, {}).get(issue_id)
            return None if issue is None else copy.copy(issue)

    def list_issues(self, project_id: str) -> list[IssueInfo]:
        """Return copies of a project's issues; empty for an unknown project."""
        with self._lock:
            return [copy.copy(issue) for issue in self._issues.get(project_id, {}).values()]

    def update_issue_status(self, project_id: str, issue_id: str, status: str) -> bool:
        """Set an issue's status; tell whether the issue exists."""
        with self._lock:
            issue = self._issues.get(project_id, {}).get(issue_id)
            if issue is None:
                return False
            issue.status = status
            return True