"""
Tests for the job CRUD layer.
"""

import pytest

from jobly.core.database import execute
from jobly.core.errors import BadRequestError, EmptyUpdateError, NotFoundError
from jobly.crud import job as job_crud


class TestCreate:

    def test_create(self, db_session, seed_data, sample_job_data):
        job = job_crud.create(db_session, sample_job_data)

        assert isinstance(job["id"], int)
        assert job["title"] == "New Job"
        assert job["salary"] == 65000
        assert float(job["equity"]) == 0.2
        assert job["companyHandle"] == "c1"

    def test_create_without_optional_fields(self, db_session, seed_data):
        job = job_crud.create(db_session, {"title": "Bare", "companyHandle": "c2"})

        assert job["salary"] is None
        assert job["equity"] is None

    def test_unknown_company(self, db_session, seed_data, sample_job_data):
        with pytest.raises(BadRequestError):
            job_crud.create(db_session, {**sample_job_data, "companyHandle": "nope"})


class TestFindAll:

    def test_no_filter(self, db_session, seed_data):
        jobs = job_crud.find_all(db_session)

        assert [j["title"] for j in jobs] == ["Job1", "Job2", "Job3"]
        assert jobs[0]["id"] == seed_data[0]
        assert jobs[0]["companyHandle"] == "c1"
        assert jobs[0]["companyName"] == "C1"
        assert jobs[2]["companyName"] == "C3"

    def test_title_filter(self, db_session, seed_data):
        jobs = job_crud.find_all(db_session, title="job2")

        assert [j["id"] for j in jobs] == [seed_data[1]]

    def test_min_salary(self, db_session, seed_data):
        jobs = job_crud.find_all(db_session, min_salary=2900)

        assert [j["title"] for j in jobs] == ["Job3"]

    def test_has_equity(self, db_session, seed_data):
        jobs = job_crud.find_all(db_session, has_equity=True)

        assert [j["title"] for j in jobs] == ["Job2"]

    def test_has_equity_false_is_no_filter(self, db_session, seed_data):
        assert len(job_crud.find_all(db_session, has_equity=False)) == 3

    def test_combined_filters(self, db_session, seed_data):
        jobs = job_crud.find_all(db_session, title="Job", min_salary=1500, has_equity=True)

        assert [j["title"] for j in jobs] == ["Job2"]

    def test_has_equity_includes_negative_equity(self, db_session, seed_data):
        """Any non-zero equity counts, including rows written outside the API"""
        execute(db_session, "UPDATE jobs SET equity = $1 WHERE id = $2", [-0.1, seed_data[2]])
        db_session.commit()

        jobs = job_crud.find_all(db_session, has_equity=True)

        assert [j["title"] for j in jobs] == ["Job2", "Job3"]


class TestGet:

    def test_get(self, db_session, seed_data):
        job = job_crud.get(db_session, seed_data[0])

        assert job["id"] == seed_data[0]
        assert job["title"] == "Job1"
        assert job["salary"] == 1000
        assert job["companyHandle"] == "c1"
        assert job["company"] == {
            "handle": "c1",
            "name": "C1",
            "description": "Desc1",
            "numEmployees": 1,
            "logoUrl": "http://c1.img",
        }

    def test_not_found(self, db_session, seed_data):
        with pytest.raises(NotFoundError):
            job_crud.get(db_session, 0)


class TestUpdate:

    def test_update(self, db_session, seed_data):
        job = job_crud.update(db_session, seed_data[0], {
            "title": "UpdateJob",
            "salary": 4000,
            "equity": 0.14,
        })

        assert job["id"] == seed_data[0]
        assert job["title"] == "UpdateJob"
        assert job["salary"] == 4000
        assert float(job["equity"]) == 0.14
        assert job["companyHandle"] == "c1"

    def test_partial_update_keeps_other_fields(self, db_session, seed_data):
        job = job_crud.update(db_session, seed_data[1], {"salary": 2500})

        assert job["title"] == "Job2"
        assert job["salary"] == 2500
        assert float(job["equity"]) == 0.2

    def test_not_found(self, db_session, seed_data):
        with pytest.raises(NotFoundError):
            job_crud.update(db_session, 0, {"title": "nope"})

    def test_no_data(self, db_session, seed_data):
        with pytest.raises(EmptyUpdateError):
            job_crud.update(db_session, seed_data[0], {})


class TestRemove:

    def test_remove(self, db_session, seed_data):
        job_crud.remove(db_session, seed_data[0])

        assert execute(db_session, "SELECT id FROM jobs WHERE id = $1", [seed_data[0]]) == []

    def test_not_found(self, db_session, seed_data):
        with pytest.raises(NotFoundError):
            job_crud.remove(db_session, 0)
