"""Pagination Utilities - DRY Implementation for Consistent Pagination (SoC)"""
from typing import Dict, Optional
from math import ceil
from records.config.settings import PaginationConfig
from records.exceptions.exceptions import ValidationError

def validate_page_args(page: int, page_size: int) -> None:
    """Pages are 1-based; both values must be positive integers"""
    for value, name in ((page, "page"), (page_size, "pageSize")):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValidationError(f"{name} must be a positive integer")

def calculate_skip(page: int, page_size: int) -> int:
    return (page - 1) * page_size

def build_pagination_meta(page: int, page_size: int, total_items: int) -> Dict:
    """
    Build pagination metadata

    Args:
        page: Page number (1-based)
        page_size: Items per page
        total_items: Number of matching documents

    Returns:
        Dict with currentPage, totalPages and totalItems
    """
    return {
        "currentPage": page,
        "totalPages": ceil(total_items / page_size),
        "totalItems": total_items
    }

def get_pagination_params(page_param: Optional[str], limit_param: Optional[str]) -> tuple:
    """
    Extract and validate pagination parameters - DRY utility

    Args:
        page_param: Page parameter as string
        limit_param: Page size parameter as string

    Returns:
        Tuple of (page, page_size) as integers
    """
    try:
        page = int(page_param) if page_param else 1
        page = max(1, page)
    except (ValueError, TypeError):
        page = 1

    try:
        page_size = int(limit_param) if limit_param else PaginationConfig.DEFAULT_PAGE_SIZE
        page_size = max(1, min(page_size, PaginationConfig.MAX_PAGE_SIZE))
    except (ValueError, TypeError):
        page_size = PaginationConfig.DEFAULT_PAGE_SIZE

    return page, page_size
