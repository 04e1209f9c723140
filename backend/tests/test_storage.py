import pytest

from models.records import JobMatchRecord, ResumeAnalysisRecord
from services.exceptions import NotFoundError
from services.storage import Repository


def _resume(text: str = "resume") -> ResumeAnalysisRecord:
    return ResumeAnalysisRecord(resume_text=text)


def test_save_assigns_sequential_ids():
    store = Repository("Resume")
    assert store.save(_resume("a")) == 1
    assert store.save(_resume("b")) == 2
    assert store.find_by_id(2).resume_text == "b"
    assert store.find_by_id(2).id == 2


def test_save_does_not_mutate_input():
    store = Repository("Resume")
    record = _resume()
    store.save(record)
    assert record.id is None


def test_find_by_id_missing():
    store = Repository("Resume")
    with pytest.raises(NotFoundError) as exc_info:
        store.find_by_id(7)
    assert exc_info.value.message == "Resume not found with id: 7"


def test_delete():
    store = Repository("Job match")
    record_id = store.save(JobMatchRecord(job_description="Skills: Go"))
    store.delete(record_id)
    with pytest.raises(NotFoundError):
        store.find_by_id(record_id)
    with pytest.raises(NotFoundError, match="Job match not found with id: 1"):
        store.delete(record_id)


def test_ids_are_not_reused_after_delete():
    store = Repository("Resume")
    store.save(_resume())
    store.delete(1)
    assert store.save(_resume()) == 2


def test_find_all_pages_newest_first():
    store = Repository("Resume")
    for name in ("first", "second", "third"):
        store.save(_resume(name))

    page = store.find_all(0, 2)
    assert [r.resume_text for r in page.items] == ["third", "second"]
    assert page.total_elements == 3
    assert page.total_pages == 2

    page = store.find_all(1, 2)
    assert [r.resume_text for r in page.items] == ["first"]


def test_find_all_past_last_page():
    store = Repository("Resume")
    store.save(_resume())
    page = store.find_all(5, 10)
    assert page.items == []
    assert page.total_elements == 1
    assert page.total_pages == 1


def test_clear_resets_ids():
    store = Repository("Resume")
    store.save(_resume())
    store.clear()
    assert store.find_all(0, 10).total_elements == 0
    assert store.save(_resume()) == 1
