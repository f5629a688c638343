import time
import uuid

from apsmock.issues import IssuesState


def test_create_issue_fields():
    state = IssuesState()
    before = int(time.time() * 1000)
    issue = state.create_issue("proj-1", "Leak", "Water on floor")
    after = int(time.time() * 1000)
    assert issue.project_id == "proj-1"
    assert issue.title == "Leak"
    assert issue.description == "Water on floor"
    assert issue.status == "open"
    assert before <= issue.created_at <= after
    assert uuid.UUID(issue.id).version == 4


def test_description_optional():
    state = IssuesState()
    issue = state.create_issue("proj-1", "Crack")
    assert issue.description is None


def test_ids_are_unique():
    state = IssuesState()
    first = state.create_issue("p", "a")
    second = state.create_issue("p", "b")
    assert first.id != second.id
    assert len(state.list_issues("p")) == 2


def test_get_issue_round_trip():
    state = IssuesState()
    issue = state.create_issue("p", "title", "desc")
    assert state.get_issue("p", issue.id) == issue


def test_get_issue_missing():
    state = IssuesState()
    issue = state.create_issue("p", "title")
    assert state.get_issue("other", issue.id) is None
    assert state.get_issue("p", "nope") is None


def test_list_issues_per_project():
    state = IssuesState()
    a = state.create_issue("p1", "a")
    b = state.create_issue("p2", "b")
    assert [i.id for i in state.list_issues("p1")] == [a.id]
    assert [i.id for i in state.list_issues("p2")] == [b.id]
    assert state.list_issues("unknown") == []


def test_update_issue_status():
    state = IssuesState()
    issue = state.create_issue("p", "a")
    assert state.update_issue_status("p", issue.id, "closed") is True
    assert state.get_issue("p", issue.id).status == "closed"


def test_update_issue_status_missing():
    state = IssuesState()
    issue = state.create_issue("p", "a")
    assert state.update_issue_status("p", "missing", "closed") is False
    assert state.update_issue_status("q", issue.id, "closed") is False
    assert state.get_issue("p", issue.id).status == "open"


def test_returned_issue_is_a_copy():
    state = IssuesState()
    issue = state.create_issue("p", "a")
    issue.status = "changed"
    assert state.get_issue("p", issue.id).status == "open"