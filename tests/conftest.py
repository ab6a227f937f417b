from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from jobboard.api.main import create_app
from jobboard.core.auth.passwords import PasswordHasher
from jobboard.core.auth.tokens import JwtConfig, TokenService
from jobboard.core.config import Settings
from jobboard.core.db import Database
from jobboard.core.models import CompanyStore, JobStore, UserStore

TEST_SECRET = "jobboard-test-secret-key-0123456789abcdef"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        secret_key=TEST_SECRET,
        env="test",
        database_path=str(tmp_path / "jobboard_test.sqlite3"),
        bcrypt_work_factor=4,
    )


@pytest.fixture()
def db(settings):
    """Fresh database with three companies, two jobs and three users."""
    database = Database(settings.database_path)
    database.init_schema()

    companies = CompanyStore(db=database)
    for n in (1, 2, 3):
        companies.create(
            {
                "handle": f"c{n}",
                "name": f"C{n}",
                "numEmployees": n,
                "description": f"Desc{n}",
                "logoUrl": f"http://c{n}.img",
            }
        )

    jobs = JobStore(db=database)
    jobs.create({"title": "Conservator, furniture", "salary": 110000, "equity": "0", "companyHandle": "c1"})
    jobs.create({"title": "Information officer", "salary": 200000, "equity": "0.05", "companyHandle": "c2"})

    users = UserStore(db=database, hasher=PasswordHasher(work_factor=4))
    for n in (1, 2, 3):
        users.register(
            {
                "username": f"u{n}",
                "firstName": f"U{n}F",
                "lastName": f"U{n}L",
                "email": f"user{n}@user.com",
                "password": f"password{n}",
                "isAdmin": False,
            }
        )
    return database


@pytest.fixture()
def company_store(db):
    return CompanyStore(db=db)


@pytest.fixture()
def job_store(db):
    return JobStore(db=db)


@pytest.fixture()
def user_store(db):
    return UserStore(db=db, hasher=PasswordHasher(work_factor=4))


@pytest.fixture()
def job_ids(db):
    """Seeded job ids keyed by title."""
    return {r["title"]: r["id"] for r in db.query("SELECT id, title FROM jobs")}


@pytest.fixture()
def tokens(settings) -> TokenService:
    return TokenService(JwtConfig.from_settings(settings))


@pytest.fixture()
def u1_token(tokens):
    return tokens.create({"username": "u1", "isAdmin": False})


@pytest.fixture()
def admin_token(tokens):
    return tokens.create({"username": "admin", "isAdmin": True})


@pytest.fixture()
def app(settings, db):
    return create_app(settings)


@pytest.fixture()
def client(app):
    return TestClient(app)
