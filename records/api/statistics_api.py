"""Statistics API - Presentation Layer"""
from flask_restful import Resource
from records.services.report.statistics_service import StatisticsService
from records.services.admin.index_service import IndexService
from records.utils.validation.input_validator import get_optional_query_params
from records.exceptions.error_handler import handle_service_error

class IndexStats(Resource):
    def __init__(self, db):
        self.service = IndexService(db)

    def get(self):
        try:
            params = get_optional_query_params(email="JohnDoe@gmail.com")
            return {"stats": self.service.demonstrate_index_use(params["email"])}, 200
        except Exception as e:
            return handle_service_error(e)

class AverageCgpa(Resource):
    def __init__(self, db):
        self.service = StatisticsService(db)

    def get(self):
        try:
            return {"averageCgpa": self.service.calculate_average_cgpa()}, 200
        except Exception as e:
            return handle_service_error(e)

class HighestCgpa(Resource):
    def __init__(self, db):
        self.service = StatisticsService(db)

    def get(self):
        try:
            return {"highestCgpa": self.service.find_highest_cgpa()}, 200
        except Exception as e:
            return handle_service_error(e)

class CountByAge(Resource):
    def __init__(self, db):
        self.service = StatisticsService(db)

    def get(self):
        try:
            counts = self.service.count_students_by_age()
            return {"counts": [{"age": age, "count": count} for age, count in counts.items()]}, 200
        except Exception as e:
            return handle_service_error(e)

class CountByRole(Resource):
    def __init__(self, db):
        self.service = StatisticsService(db)

    def get(self):
        try:
            counts = self.service.count_students_by_role()
            return {"counts": [{"role": role, "count": count} for role, count in counts.items()]}, 200
        except Exception as e:
            return handle_service_error(e)

class AverageAgeByRole(Resource):
    def __init__(self, db):
        self.service = StatisticsService(db)

    def get(self):
        try:
            averages = self.service.calculate_average_age_by_role()
            return {"averages": [{"role": role, "avgAge": avg} for role, avg in averages.items()]}, 200
        except Exception as e:
            return handle_service_error(e)
