"""In-memory store of Model Derivative translation jobs."""

from __future__ import annotations

import copy
import re
import threading
import time
from dataclasses import dataclass
from enum import Enum

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1
_FALLBACK_PROGRESS = 25
_STEP = 25


class TranslationStatus(Enum):
    """State of a translation job."""

    PENDING = "pending"
    IN_PROGRESS = "inprogress"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class TranslationJob:
    urn: str
    status: TranslationStatus
    progress: str
    created_at: int


def _progress_value(progress: str) -> int:
    text = progress.rstrip("%")
    if _UNSIGNED.fullmatch(text):
        value = int(text)
        if value <= _U32_MAX:
            return value
    return _FALLBACK_PROGRESS


class TranslationState:
    """Translation jobs keyed by URN."""

    def __init__(self) -> None:
        self._jobs: dict[str, TranslationJob] = {}
        self._lock = threading.Lock()

    def create_job(self, urn: str) -> TranslationJob:
        """Start a pending job, replacing any job for the same URN."""
        job = TranslationJob(
            urn=urn,
            status=TranslationStatus.PENDING,
            progress="0%",
            created_at=int(time.time() * 1000),
        )
        with self._lock:
            self._jobs[urn] = job
        return copy.copy(job)

    def get_job(self, urn: str) -> TranslationJob | None:
        """Return a copy of the job, or None."""
        with self._lock:
            job = self._jobs.get(urn)
            return None if job is None else copy.copy(job)

    def update_job_status(self, urn: str, status: TranslationStatus, progress: str) -> bool:
        """Set a job's status and progress; tell whether the job exists."""
        with self._lock:
            job = self._jobs.get(urn)
            if job is None:
                return False
            job.status = status
            job.progress = progress
            return True

    def simulate_progress(self, urn: str) -> None:
        """Advance a job by one step; finished jobs and unknown URNs are left alone."""
        with self._lock:
            job = self._jobs.get(urn)
            if job is None:
                return
            if job.status is TranslationStatus.PENDING:
                job.status = TranslationStatus.IN_PROGRESS
                job.progress = f"{_STEP}%"
            elif job.status is TranslationStatus.IN_PROGRESS:
                value = _progress_value(job.progress)
                if value < 100:
                    job.progress = f"{value + _STEP}%"
                else:
                    job.status = TranslationStatus.SUCCESS
                    job.progress = "complete"