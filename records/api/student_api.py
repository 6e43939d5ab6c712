"""Student API - Presentation Layer"""
from flask_restful import Resource
from records.auth.auth_middleware import admin_required
from records.services.academic.student_service import StudentService
from records.services.academic.student_query_service import StudentQueryService
from records.utils.validation.input_validator import get_json_data, get_optional_query_params
from records.utils.pagination.pagination_utils import get_pagination_params
from records.exceptions.error_handler import handle_service_error

class StudentCreateResource(Resource):
    def __init__(self, db):
        self.service = StudentService(db)

    def post(self):
        try:
            data = get_json_data()
            student = self.service.create_student(
                data.get("name"),
                data.get("age"),
                data.get("email"),
                data.get("phone"),
                data.get("classId"),
                data.get("role"),
                data.get("electives"),
                data.get("cgpa")
            )
            return {"student": student}, 201
        except Exception as e:
            return handle_service_error(e)

class StudentResource(Resource):
    def __init__(self, db):
        self.query_service = StudentQueryService(db)
        self.service = StudentService(db)

    def get(self, student_id):
        """Student with class and branch populated"""
        try:
            return {"student": self.query_service.find_student_by_id(student_id)}, 200
        except Exception as e:
            return handle_service_error(e)

    @admin_required
    def delete(self, student_id):
        try:
            deleted = self.service.delete_student_by_id(student_id)
            if deleted is None:
                return {"success": False, "message": f"student with id {student_id} not found"}, 404
            return {"success": True, "message": f"student with id {student_id} deleted"}, 200
        except Exception as e:
            return handle_service_error(e)

class StudentNoPhoneResource(Resource):
    def __init__(self, db):
        self.query_service = StudentQueryService(db)

    def get(self, student_id):
        try:
            return {"student": self.query_service.find_student_by_id_no_phone(student_id)}, 200
        except Exception as e:
            return handle_service_error(e)

class StudentNoPhoneLeanResource(Resource):
    def __init__(self, db):
        self.query_service = StudentQueryService(db)

    def get(self, student_id):
        try:
            return {"student": self.query_service.find_student_by_id_no_phone_lean(student_id)}, 200
        except Exception as e:
            return handle_service_error(e)

class AllStudentsResource(Resource):
    def __init__(self, db):
        self.query_service = StudentQueryService(db)

    def get(self):
        try:
            return {"students": self.query_service.find_all_students()}, 200
        except Exception as e:
            return handle_service_error(e)

class PaginatedStudentsResource(Resource):
    def __init__(self, db):
        self.query_service = StudentQueryService(db)

    def get(self):
        try:
            params = get_optional_query_params(page="1", pageSize=None)
            page, page_size = get_pagination_params(params["page"], params["pageSize"])
            return self.query_service.find_all_students_paginated(page, page_size), 200
        except Exception as e:
            return handle_service_error(e)

class StudentsByClassResource(Resource):
    def __init__(self, db):
        self.query_service = StudentQueryService(db)

    def get(self, class_id):
        try:
            return {"students": self.query_service.find_students_by_class(class_id)}, 200
        except Exception as e:
            return handle_service_error(e)
