import pytest
from bson import ObjectId

from records.exceptions.exceptions import ValidationError
from records.services.academic.class_service import ClassService
from records.services.academic.student_query_service import StudentQueryService
from records.services.academic.student_service import StudentService


@pytest.fixture()
def query_service(db):
    return StudentQueryService(db)


def test_find_student_by_id_resolves_class_and_branch(query_service, seeded):
    student = seeded["students"][1]

    found = query_service.find_student_by_id(student["_id"])

    assert found["email"] == student["email"]
    assert found["phone"] == student["phone"]
    assert found["class"]["_id"] == seeded["class"]["_id"]
    assert found["class"]["branch"] == seeded["branch"]


def test_not_found_is_none_not_an_error(query_service, seeded):
    missing = str(ObjectId())

    assert query_service.find_student_by_id(missing) is None
    assert query_service.find_student_by_id_no_phone(missing) is None
    assert query_service.find_student_by_id_no_phone_lean("not-an-object-id") is None


def test_no_phone_variants_redact_phone(query_service, seeded):
    student_id = seeded["students"][0]["_id"]

    redacted = query_service.find_student_by_id_no_phone(student_id)
    lean = query_service.find_student_by_id_no_phone_lean(student_id)

    assert "phone" not in redacted
    assert redacted == lean
    assert redacted["class"]["branch"]["name"] == "CSE"


def test_dangling_class_reference_resolves_to_none(db, query_service):
    student = StudentService(db).create_student(
        "Orphan", 20, "orphan@nmitMock.ac", "9000000001", class_id=str(ObjectId())
    )

    found = query_service.find_student_by_id(student["_id"])
    redacted = query_service.find_student_by_id_no_phone(student["_id"])

    assert found["class"] is None
    assert redacted["class"] is None
    assert "phone" not in redacted


def test_dangling_branch_reference_resolves_to_none(db, query_service):
    section = ClassService(db).create_class("Z", str(ObjectId()))
    student = StudentService(db).create_student(
        "Lost", 21, "lost@nmitMock.ac", "9000000002", class_id=section["_id"]
    )

    found = query_service.find_student_by_id(student["_id"])

    assert found["class"]["_id"] == section["_id"]
    assert found["class"]["branch"] is None


def test_find_all_students_in_insertion_order(query_service, seeded):
    students = query_service.find_all_students()

    assert [s["_id"] for s in students] == [s["_id"] for s in seeded["students"]]


def test_find_all_students_empty_collection(query_service):
    assert query_service.find_all_students() == []


@pytest.mark.parametrize("page_size", [1, 2, 3, 5])
def test_pages_cover_every_student_exactly_once(query_service, seeded, page_size):
    first = query_service.find_all_students_paginated(1, page_size)
    total_pages = first["pagination"]["totalPages"]
    total_items = first["pagination"]["totalItems"]

    seen = []
    for page in range(1, total_pages + 1):
        seen.extend(s["_id"] for s in query_service.find_all_students_paginated(page, page_size)["data"])

    assert total_items == 3
    assert len(seen) == total_items
    assert len(set(seen)) == total_items


def test_page_past_the_end_is_empty_with_accurate_metadata(query_service, seeded):
    result = query_service.find_all_students_paginated(5, 2)

    assert result["data"] == []
    assert result["pagination"] == {"currentPage": 5, "totalPages": 2, "totalItems": 3}


def test_huge_page_number_does_not_query_the_store(query_service, seeded, monkeypatch):
    student_repo = query_service.repo_factory.get_student_repo()

    def fail_find_all(*args, **kwargs):
        raise AssertionError("find_all should not run past the last page")

    monkeypatch.setattr(student_repo, "find_all", fail_find_all)
    result = query_service.find_all_students_paginated(10 ** 19, 10)

    assert result["data"] == []
    assert result["pagination"] == {"currentPage": 10 ** 19, "totalPages": 1, "totalItems": 3}


def test_pagination_on_empty_collection(query_service):
    result = query_service.find_all_students_paginated(1, 10)

    assert result == {"data": [], "pagination": {"currentPage": 1, "totalPages": 0, "totalItems": 0}}


@pytest.mark.parametrize("page, page_size", [(0, 10), (1, 0), (-1, 5), ("1", 5)])
def test_pagination_rejects_invalid_arguments(query_service, page, page_size):
    with pytest.raises(ValidationError):
        query_service.find_all_students_paginated(page, page_size)


def test_find_students_by_class_populates_class_only(query_service, seeded):
    students = query_service.find_students_by_class(seeded["class"]["_id"])

    assert len(students) == 3
    for student in students:
        assert student["class"]["name"] == "A"
        assert student["class"]["branch"] == seeded["branch"]["_id"]


def test_find_students_by_class_without_matches(query_service, seeded):
    assert query_service.find_students_by_class(str(ObjectId())) == []
    assert query_service.find_students_by_class("invalid") == []


def test_elective_filters(query_service, seeded):
    with_ai = query_service.find_students_by_electives(["AI"])
    without_ai = query_service.find_students_by_not_electives(["AI"])

    assert [s["name"] for s in with_ai] == ["Student 0"]
    assert [s["name"] for s in without_ai] == ["Student 1", "Student 2"]


def test_age_filters(db, query_service):
    service = StudentService(db)
    for i, age in enumerate([17, 20, 25, 30, 34]):
        service.create_student(f"S{age}", age, f"s{i}@nmitMock.ac", f"91000000{i}")

    assert [s["age"] for s in query_service.find_students_younger_than()] == [17]
    assert [s["age"] for s in query_service.find_students_by_age_between()] == [25]
    assert [s["age"] for s in query_service.find_students_outside_age_range()] == [17, 34]
