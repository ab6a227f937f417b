import pytest

from jobboard.core.errors import DuplicateError, EmptyUpdateError, NotFoundError, ReferenceNotFoundError
from jobboard.core.filters import job_filter, jobs_of_company


def test_create(job_store):
    job = job_store.create({"title": "New", "salary": 100, "equity": "0.1", "companyHandle": "c1"})
    assert isinstance(job["id"], int)
    assert job == {"id": job["id"], "title": "New", "salary": 100, "equity": "0.1", "companyHandle": "c1"}


def test_create_unknown_company(job_store):
    with pytest.raises(ReferenceNotFoundError) as ei:
        job_store.create({"title": "New", "salary": 1, "equity": "0", "companyHandle": "nope"})
    assert ei.value.status_code == 400


def test_create_duplicate_title(job_store):
    with pytest.raises(DuplicateError):
        job_store.create({"title": "Information officer", "companyHandle": "c3"})


def test_find_all_ordered_by_title(job_store):
    assert [j["title"] for j in job_store.find_all()] == ["Conservator, furniture", "Information officer"]


def test_find_by_filter(job_store):
    assert [j["title"] for j in job_store.find_by_filter(job_filter(has_equity=True))] == ["Information officer"]
    assert [j["title"] for j in job_store.find_by_filter(job_filter(has_equity=False))] == [
        "Conservator, furniture"
    ]
    assert [j["title"] for j in job_store.find_by_filter(job_filter(min_salary=150000))] == ["Information officer"]
    assert [j["title"] for j in job_store.find_by_filter(job_filter(title="CONSERV"))] == ["Conservator, furniture"]
    assert [j["companyHandle"] for j in job_store.find_by_filter(jobs_of_company("c2"))] == ["c2"]


def test_get(job_store, job_ids):
    job_id = job_ids["Information officer"]
    assert job_store.get(job_id)["equity"] == "0.05"


def test_get_not_found(job_store):
    with pytest.raises(NotFoundError):
        job_store.get(0)


def test_update(job_store, job_ids):
    job_id = job_ids["Conservator, furniture"]
    job = job_store.update(job_id, {"salary": 1, "equity": None})
    assert job["salary"] == 1
    assert job["equity"] is None
    assert job["title"] == "Conservator, furniture"


def test_update_company_must_exist(job_store, job_ids):
    with pytest.raises(ReferenceNotFoundError):
        job_store.update(job_ids["Information officer"], {"companyHandle": "nope"})


def test_update_title_clash(job_store, job_ids):
    with pytest.raises(DuplicateError):
        job_store.update(job_ids["Information officer"], {"title": "Conservator, furniture"})


def test_update_empty_and_missing(job_store):
    with pytest.raises(EmptyUpdateError):
        job_store.update(1, {})
    with pytest.raises(NotFoundError):
        job_store.update(0, {"salary": 5})


def test_remove(job_store, job_ids):
    job_id = job_ids["Information officer"]
    assert job_store.remove(job_id) == {"title": "Information officer"}
    with pytest.raises(NotFoundError):
        job_store.remove(job_id)
