import mongomock
import pytest
from flask_jwt_extended import create_access_token

from records.app import create_app
from records.services.admin.index_service import IndexService
from records.services.academic.branch_service import BranchService
from records.services.academic.class_service import ClassService
from records.services.academic.student_service import StudentService

TEST_JWT_SECRET = "test-secret-key-with-enough-length-for-hs256"


@pytest.fixture()
def db():
    """
    In-memory database with the production indexes.
    A fresh client per test keeps collections isolated.
    """
    client = mongomock.MongoClient()
    database = client["records_test"]
    IndexService(database).ensure_indexes()
    yield database
    client.close()


@pytest.fixture()
def seeded(db):
    """One branch, one class and three students with cgpa 7, 8 and 9."""
    branch = BranchService(db).create_branch("CSE", ["DBMS", "Operating Systems"])
    section = ClassService(db).create_class("A", branch["_id"])
    student_service = StudentService(db)
    students = [
        student_service.create_student(
            f"Student {i}", 18 + i, f"student{i}@nmitMock.ac", f"90000000{i}",
            section["_id"], "Student", ["AI"] if i == 0 else [], cgpa
        )
        for i, cgpa in enumerate([7.0, 8.0, 9.0])
    ]
    return {"branch": branch, "class": section, "students": students}


@pytest.fixture()
def app(db):
    return create_app(db, {"TESTING": True, "JWT_SECRET_KEY": TEST_JWT_SECRET})


@pytest.fixture()
def client(app):
    return app.test_client()


def make_token(app, role):
    with app.app_context():
        return create_access_token(identity="tester", additional_claims={"role": role})


@pytest.fixture()
def admin_headers(app):
    return {"Authorization": f"Bearer {make_token(app, 'admin')}"}


@pytest.fixture()
def student_headers(app):
    return {"Authorization": f"Bearer {make_token(app, 'Student')}"}
