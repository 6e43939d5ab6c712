from records.services.admin.index_service import IndexService


def index_keys(collection):
    return {tuple(info["key"]) for info in collection.index_information().values()}


def test_ensure_indexes_creates_unique_constraints(db):
    unique = {
        tuple(info["key"])
        for collection in (db["branches"], db["students"], db["admins"])
        for info in collection.index_information().values()
        if info.get("unique")
    }

    assert (("name", 1),) in unique
    assert (("email", 1),) in unique
    assert (("role", 1),) in unique


def test_create_student_name_index(db):
    IndexService(db).create_student_name_index()

    assert (("name", 1),) in index_keys(db["students"])


def test_demonstrate_index_use_reports_timings(db, seeded):
    stats = IndexService(db).demonstrate_index_use(seeded["students"][0]["email"])

    assert stats["withoutIndex"] >= 0
    assert stats["withIndex"] >= 0
