"""In-memory store of Data Management hubs and projects."""

from __future__ import annotations

import copy
import threading
from dataclasses import dataclass

DEFAULT_HUB_ID = "b.default-hub"
DEFAULT_PROJECT_ID = "b.default-project"


@dataclass
class HubInfo:
    id: str
    name: str
    region: str


@dataclass
class ProjectInfo:
    id: str
    hub_id: str
    name: str


class ProjectState:
    """Hubs and their projects, seeded with one default hub and project."""

    def __init__(self) -> None:
        self._hubs: dict[str, HubInfo] = {}
        self._projects: dict[str, ProjectInfo] = {}
        self._hub_projects: dict[str, list[str]] = {}
        self._lock = threading.Lock()
        self._add_defaults()

    def _add_defaults(self) -> None:
        self._hubs[DEFAULT_HUB_ID] = HubInfo(id=DEFAULT_HUB_ID, name="Default Hub", region="US")
        self._projects[DEFAULT_PROJECT_ID] = ProjectInfo(
            id=DEFAULT_PROJECT_ID, hub_id=DEFAULT_HUB_ID, name="Default Project"
        )
        self._hub_projects.setdefault(DEFAULT_HUB_ID, []).append(DEFAULT_PROJECT_ID)

    def list_hubs(self) -> list[HubInfo]:
        """Return copies of all hubs."""
        with self._lock:
            return [copy.copy(hub) for hub in self._hubs.values()]

    def get_hub(self, hub_id: str) -> HubInfo | None:
        """Return a copy of the hub, or None."""
        with self._lock:
            hub = self._hubs.get(hub_id)
            return None if hub is None else copy.copy(hub)

    def list_projects(self, hub_id: str) -> list[ProjectInfo]:
        """Return copies of a hub's projects; empty for an unknown hub."""
        with self._lock:
            return [
                copy.copy(self._projects[project_id])
                for project_id in self._hub_projects.get(hub_id, [])
                if project_id in self._projects
            ]

    def get_project(self, project_id: str) -> ProjectInfo | None:
        """Return a copy of the project, or None."""
        with self._lock:
            project = self._projects.get(project_id)
            return None if project is None else copy.copy(project)