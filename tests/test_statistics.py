import pytest

from records.exceptions.exceptions import EmptyAggregationError
from records.services.academic.student_service import StudentService
from records.services.report.statistics_service import StatisticsService


def add_students(db, rows):
    service = StudentService(db)
    for i, (age, role, cgpa) in enumerate(rows):
        service.create_student(f"S{i}", age, f"s{i}@nmitMock.ac", f"92000000{i}", role=role, cgpa=cgpa)


def test_average_cgpa(db, seeded):
    assert StatisticsService(db).calculate_average_cgpa() == 8.0


def test_average_cgpa_is_rounded_to_three_decimals(db):
    add_students(db, [(20, "Student", 7.1234), (20, "Student", 8.0)])

    assert StatisticsService(db).calculate_average_cgpa() == 7.562


def test_highest_cgpa(db, seeded):
    assert StatisticsService(db).find_highest_cgpa() == 9.0


@pytest.mark.parametrize("method", ["calculate_average_cgpa", "find_highest_cgpa"])
def test_scalar_statistics_fail_explicitly_on_empty_collection(db, method):
    with pytest.raises(EmptyAggregationError):
        getattr(StatisticsService(db), method)()


def test_count_students_by_role(db):
    add_students(db, [(20, "Student", 7.0), (21, "Student", 8.0), (30, "admin", 9.0)])

    assert StatisticsService(db).count_students_by_role() == {"Student": 2, "admin": 1}


def test_count_students_by_age(db):
    add_students(db, [(19, "Student", 7.0), (21, "Student", 8.0), (19, "Student", 9.0)])

    counts = StatisticsService(db).count_students_by_age()

    assert counts == {19: 2, 21: 1}
    assert list(counts) == [19, 21]


def test_average_age_by_role_is_not_rounded(db):
    add_students(db, [(18, "Student", 7.0), (19, "Student", 8.0), (19, "Student", 9.0), (31, "admin", 6.0)])

    averages = StatisticsService(db).calculate_average_age_by_role()

    assert averages["Student"] == pytest.approx(56 / 3)
    assert averages["Student"] != round(56 / 3, 3)
    assert averages["admin"] == 31


def test_grouped_statistics_on_empty_collection(db):
    service = StatisticsService(db)

    assert service.count_students_by_age() == {}
    assert service.count_students_by_role() == {}
    assert service.calculate_average_age_by_role() == {}


def test_statistics_read_live_data(db, seeded):
    service = StatisticsService(db)
    assert service.find_highest_cgpa() == 9.0

    StudentService(db).create_student("Topper", 22, "topper@nmitMock.ac", "9300000000", cgpa=9.9)

    assert service.find_highest_cgpa() == 9.9
