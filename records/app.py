from flask import Flask
from flask_restful import Api, Resource
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from pymongo.database import Database

from records.config.settings import SecurityConfig, ServerConfig
from records.records_db import open_database
from records.logging_logs.log_config import get_logger

from records.services.admin.index_service import IndexService
from records.services.admin.admin_bootstrap_service import AdminBootstrapService

# Branch & Class APIs
from records.api.academic_api import BranchResource, ClassResource

# Student APIs
from records.api.student_api import (
    StudentCreateResource, StudentResource, StudentNoPhoneResource, StudentNoPhoneLeanResource,
    AllStudentsResource, PaginatedStudentsResource, StudentsByClassResource
)

# Statistics APIs
from records.api.statistics_api import (
    IndexStats, AverageCgpa, HighestCgpa, CountByAge, CountByRole, AverageAgeByRole
)

logger = get_logger("app")

class HealthCheck(Resource):
    def get(self):
        return {"message": "Initial Setup for Backend"}, 200

class RecordsFlask(Flask):
    def __init__(self, db: Database, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.db = db

    def add_api(self):
        api = Api(self, prefix="/api/v1", catch_all_404s=True)
        kwargs = {"db": self.db}
        api.add_resource(HealthCheck, "/")
        # Branch & Class apis
        api.add_resource(BranchResource, "/branch", resource_class_kwargs=kwargs)
        api.add_resource(ClassResource, "/class", resource_class_kwargs=kwargs)
        # Student apis
        api.add_resource(StudentCreateResource, "/student", resource_class_kwargs=kwargs)
        api.add_resource(AllStudentsResource, "/student/all", resource_class_kwargs=kwargs)
        api.add_resource(PaginatedStudentsResource, "/students", resource_class_kwargs=kwargs)
        api.add_resource(StudentResource, "/student/<string:student_id>", resource_class_kwargs=kwargs)
        api.add_resource(StudentNoPhoneResource, "/student/<string:student_id>/no-phone", resource_class_kwargs=kwargs)
        api.add_resource(StudentNoPhoneLeanResource, "/student/<string:student_id>/no-phone-lean", resource_class_kwargs=kwargs)
        api.add_resource(StudentsByClassResource, "/students/class/<string:class_id>", resource_class_kwargs=kwargs)
        # Statistics apis
        api.add_resource(IndexStats, "/stats", resource_class_kwargs=kwargs)
        api.add_resource(AverageCgpa, "/avg-cgpa", resource_class_kwargs=kwargs)
        api.add_resource(CountByAge, "/count-by-age", resource_class_kwargs=kwargs)
        api.add_resource(HighestCgpa, "/highest-cgpa", resource_class_kwargs=kwargs)
        api.add_resource(CountByRole, "/count-by-role", resource_class_kwargs=kwargs)
        api.add_resource(AverageAgeByRole, "/average-age-by-role", resource_class_kwargs=kwargs)
        return api

def create_app(db: Database, config: dict = None) -> RecordsFlask:
    """Build the application around an open database handle"""
    app = RecordsFlask(db, __name__)
    app.config["JWT_SECRET_KEY"] = SecurityConfig.JWT_SECRET_KEY
    if config:
        app.config.update(config)

    CORS(app, origins=[SecurityConfig.CORS_ORIGIN])
    JWTManager(app)
    app.add_api()

    # Startup-only work; the admin insert is atomic so concurrent boots are safe
    IndexService(db).ensure_indexes()
    AdminBootstrapService(db).create_admin_user()
    return app

def main():
    with open_database() as db:
        app = create_app(db)
        logger.info(f"Server is running on port {ServerConfig.PORT}")
        app.run(host=ServerConfig.HOST, port=ServerConfig.PORT)

if __name__ == '__main__':
    main()
