"""Validation utilities - Input validation, data validation"""
from .validation_utils import ValidationUtils
from .input_validator import get_json_data, get_optional_query_params
