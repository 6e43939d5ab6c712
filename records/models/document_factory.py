"""Record Document Factory - Branch, Class, Student and Admin documents (SoC)"""
from typing import Any, Dict, List, Optional
from records.config.settings import DEFAULT_STUDENT_ROLE, CGPA_MIN, CGPA_MAX
from records.utils.security.security_utils import validate_object_id
from records.utils.validation.validation_utils import ValidationUtils

class RecordDocumentFactory:
    """Validates input and applies schema defaults before documents reach the store"""

    @staticmethod
    def build_branch(name: Any, subjects: Optional[List[str]] = None) -> Dict:
        return {
            "name": ValidationUtils.validate_non_empty_string(name, "name"),
            "subjects": ValidationUtils.validate_string_list(subjects, "subjects")
        }

    @staticmethod
    def build_class(name: Any, branch_id: Any = None) -> Dict:
        return {
            "name": ValidationUtils.validate_non_empty_string(name, "name"),
            "branch": validate_object_id(branch_id, "branchId") if branch_id else None
        }

    @staticmethod
    def build_student(
        name: Any,
        age: Any,
        email: Any,
        phone: Any,
        class_id: Any = None,
        role: Optional[str] = None,
        electives: Optional[List[str]] = None,
        cgpa: Any = None
    ) -> Dict:
        """Build a student document; role, electives and cgpa fall back to defaults"""
        return {
            "name": ValidationUtils.validate_non_empty_string(name, "name"),
            "age": ValidationUtils.validate_non_negative_integer(age, "age"),
            "class": validate_object_id(class_id, "classId") if class_id else None,
            "email": ValidationUtils.validate_non_empty_string(email, "email"),
            "phone": ValidationUtils.validate_phone(phone),
            "role": ValidationUtils.validate_non_empty_string(role, "role") if role else DEFAULT_STUDENT_ROLE,
            "electives": ValidationUtils.validate_string_list(electives, "electives"),
            "cgpa": ValidationUtils.validate_number_in_range(
                0 if cgpa is None else cgpa, "cgpa", CGPA_MIN, CGPA_MAX
            )
        }

    @staticmethod
    def build_admin(seed: Dict) -> Dict:
        ValidationUtils.validate_required_fields(seed, "name", "age", "email", "phone", "role")
        return {
            "name": ValidationUtils.validate_non_empty_string(seed["name"], "name"),
            "age": ValidationUtils.validate_non_negative_integer(seed["age"], "age"),
            "email": ValidationUtils.validate_non_empty_string(seed["email"], "email"),
            "phone": seed["phone"],
            "role": seed["role"]
        }
