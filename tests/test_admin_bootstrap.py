from records.config.settings import ADMIN_SEED
from records.services.admin.admin_bootstrap_service import AdminBootstrapService


def test_create_admin_user_is_idempotent(db):
    service = AdminBootstrapService(db)

    assert service.create_admin_user() is True
    assert service.create_admin_user() is False
    assert db["admins"].count_documents({"role": "admin"}) == 1


def test_admin_record_uses_seed_values(db):
    AdminBootstrapService(db).create_admin_user()

    admin = db["admins"].find_one({"role": "admin"})

    assert admin["name"] == ADMIN_SEED["name"]
    assert admin["email"] == ADMIN_SEED["email"]
    assert admin["age"] == ADMIN_SEED["age"]


def test_existing_admin_is_left_untouched(db):
    db["admins"].insert_one({"name": "root", "role": "admin", "age": 40, "email": "root@nmitMock.ac", "phone": 1})

    assert AdminBootstrapService(db).create_admin_user() is False
    assert db["admins"].find_one({"role": "admin"})["name"] == "root"


def test_separate_service_instances_still_create_one_admin(db):
    results = [AdminBootstrapService(db).create_admin_user() for _ in range(3)]

    assert results == [True, False, False]
    assert db["admins"].count_documents({}) == 1
