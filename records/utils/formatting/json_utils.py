"""Convert BSON ObjectIds in records to strings before they leave the service layer"""
from typing import Any, Dict, List, Union
from bson import ObjectId

def stringify_ids(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: stringify_ids(item) for key, item in value.items()}
    if isinstance(value, list):
        return [stringify_ids(item) for item in value]
    return value

def sanitize_mongo_document(doc: Union[Dict, List, None]) -> Union[Dict, List, None]:
    """Record (or list of records) with every ObjectId rendered as its hex string"""
    if doc is None:
        return None
    return stringify_ids(doc)
