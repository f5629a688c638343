import time

import pytest

from apsmock.translations import TranslationState, TranslationStatus


def test_create_job():
    state = TranslationState()
    before = int(time.time() * 1000)
    job = state.create_job("urn:1")
    after = int(time.time() * 1000)
    assert job.urn == "urn:1"
    assert job.status is TranslationStatus.PENDING
    assert job.progress == "0%"
    assert before <= job.created_at <= after


def test_get_job_round_trip():
    state = TranslationState()
    job = state.create_job("urn:1")
    assert state.get_job("urn:1") == job
    assert state.get_job("urn:2") is None


def test_status_values():
    assert TranslationStatus("inprogress") is TranslationStatus.IN_PROGRESS
    assert TranslationStatus("success") is TranslationStatus.SUCCESS


def test_update_job_status():
    state = TranslationState()
    state.create_job("urn:1")
    assert state.update_job_status("urn:1", TranslationStatus.FAILED, "failed") is True
    job = state.get_job("urn:1")
    assert job.status is TranslationStatus.FAILED
    assert job.progress == "failed"


def test_update_job_status_missing():
    state = TranslationState()
    assert state.update_job_status("urn:x", TranslationStatus.SUCCESS, "complete") is False
    assert state.get_job("urn:x") is None


def test_first_step_starts_job():
    state = TranslationState()
    state.create_job("urn:1")
    state.simulate_progress("urn:1")
    job = state.get_job("urn:1")
    assert job.status is TranslationStatus.IN_PROGRESS
    assert job.progress == "25%"


def test_progress_reaches_completion():
    state = TranslationState()
    state.create_job("urn:1")
    seen = []
    for _ in range(10):
        state.simulate_progress("urn:1")
        job = state.get_job("urn:1")
        seen.append((job.status, job.progress))
        if job.status is TranslationStatus.SUCCESS:
            break
    assert seen[-1] == (TranslationStatus.SUCCESS, "complete")
    assert seen[-2] == (TranslationStatus.IN_PROGRESS, "100%")
    values = [int(progress.rstrip("%")) for status, progress in seen[:-1]]
    assert values == sorted(values)


def test_finished_job_stays_finished():
    state = TranslationState()
    state.create_job("urn:1")
    state.update_job_status("urn:1", TranslationStatus.SUCCESS, "complete")
    state.simulate_progress("urn:1")
    job = state.get_job("urn:1")
    assert (job.status, job.progress) == (TranslationStatus.SUCCESS, "complete")


@pytest.mark.parametrize("progress", ["complete", "abc%", "-5%"])
def test_unreadable_progress_falls_back(progress):
    state = TranslationState()
    state.create_job("urn:1")
    state.update_job_status("urn:1", TranslationStatus.IN_PROGRESS, progress)
    state.simulate_progress("urn:1")
    assert state.get_job("urn:1").progress == "50%"


def test_simulate_unknown_urn_does_nothing():
    state = TranslationState()
    state.simulate_progress("urn:none")
    assert state.get_job("urn:none") is None