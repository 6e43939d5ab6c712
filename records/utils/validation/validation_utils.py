"""Consolidated Validation Utilities - Single Source of Truth"""
from typing import Dict, Any, List, Optional
from records.exceptions.exceptions import ValidationError

class ValidationUtils:
    """Unified validation utilities - eliminates all duplication"""

    @staticmethod
    def validate_required_fields(data: Dict, *fields: str) -> None:
        """Validate required fields exist and are not empty"""
        missing = [f for f in fields if data.get(f) in (None, "")]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    @staticmethod
    def validate_non_negative_integer(value: Any, field_name: str) -> int:
        """Validate non-negative integer"""
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValidationError(f"{field_name} must be a non-negative integer")
        return value

    @staticmethod
    def validate_non_empty_string(value: Any, field_name: str) -> str:
        """Validate non-empty string"""
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"{field_name} must be a non-empty string")
        return value.strip()

    @staticmethod
    def validate_number_in_range(value: Any, field_name: str, low: float, high: float) -> float:
        """Validate numeric value within [low, high]"""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(f"{field_name} must be a number")
        if not low <= value <= high:
            raise ValidationError(f"{field_name} must be between {low} and {high}")
        return float(value)

    @staticmethod
    def validate_string_list(value: Optional[List], field_name: str) -> List[str]:
        """Validate list of strings, dropping repeats but keeping order"""
        if value is None:
            return []
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ValidationError(f"{field_name} must be a list of strings")
        seen = []
        for item in (item.strip() for item in value):
            if item and item not in seen:
                seen.append(item)
        return seen

    @staticmethod
    def validate_phone(value: Any, field_name: str = "phone") -> str:
        """Phone numbers are stored as strings"""
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise ValidationError(f"{field_name} must be a string or number")
        return ValidationUtils.validate_non_empty_string(str(value), field_name)
