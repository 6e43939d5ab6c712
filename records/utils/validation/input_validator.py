"""Centralized Input Validation - DRY Implementation"""
from flask import request
from records.exceptions.exceptions import ValidationError

def get_json_data():
    """Centralized JSON parsing"""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data

def get_optional_query_params(**param_defaults):
    """Get optional query parameters with defaults"""
    params = {}

    for param, default in param_defaults.items():
        params[param] = request.args.get(param, default)

    return params
