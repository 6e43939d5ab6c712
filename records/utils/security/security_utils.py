"""Security utilities - DRY principle"""
from typing import Any, Optional
from bson import ObjectId
from bson.errors import InvalidId
from records.exceptions.exceptions import ValidationError

def validate_object_id(obj_id: Any, field_name: str = "id") -> ObjectId:
    """Validate and return ObjectId"""
    if isinstance(obj_id, ObjectId):
        return obj_id
    if isinstance(obj_id, dict):
        raise ValidationError(f"{field_name} cannot be dict (NoSQL injection attempt)")
    try:
        return ObjectId(obj_id)
    except (InvalidId, TypeError):
        raise ValidationError(f"Invalid ObjectId format for {field_name}")

def parse_object_id(obj_id: Any) -> Optional[ObjectId]:
    """Parse ObjectId for lookups; malformed ids match nothing"""
    try:
        return validate_object_id(obj_id)
    except ValidationError:
        return None
