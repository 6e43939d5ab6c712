"""Branch and Class API - Presentation Layer"""
from flask_restful import Resource
from records.services.academic.branch_service import BranchService
from records.services.academic.class_service import ClassService
from records.utils.validation.input_validator import get_json_data
from records.exceptions.error_handler import handle_service_error

class BranchResource(Resource):
    def __init__(self, db):
        self.service = BranchService(db)

    def post(self):
        """Create a new branch"""
        try:
            data = get_json_data()
            branch = self.service.create_branch(data.get("name"), data.get("subjects"))
            return {"newBranch": branch}, 201
        except Exception as e:
            return handle_service_error(e)

class ClassResource(Resource):
    def __init__(self, db):
        self.service = ClassService(db)

    def post(self):
        """Create a new class under a branch"""
        try:
            data = get_json_data()
            new_class = self.service.create_class(data.get("name"), data.get("branchId"))
            return {"newClass": new_class}, 201
        except Exception as e:
            return handle_service_error(e)
