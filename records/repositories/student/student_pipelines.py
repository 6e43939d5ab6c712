"""Student Domain Pipelines - Statistics over the students collection"""
from typing import List, Dict

# ═══════════════════════════════════════════════════════════════════════════════
# SINGLE BUCKET PIPELINES
# ═══════════════════════════════════════════════════════════════════════════════

def build_average_cgpa_pipeline() -> List[Dict]:
    """Mean CGPA over every student"""
    return [
        {"$group": {
            "_id": None,
            "avgCgpa": {"$avg": "$cgpa"}
        }}
    ]

def build_highest_cgpa_pipeline() -> List[Dict]:
    """Maximum CGPA over every student"""
    return [
        {"$group": {
            "_id": None,
            "maxCgpa": {"$max": "$cgpa"}
        }}
    ]

# ═══════════════════════════════════════════════════════════════════════════════
# GROUPED PIPELINES
# ═══════════════════════════════════════════════════════════════════════════════

def build_count_by_field_pipeline(field: str) -> List[Dict]:
    """Number of students per distinct value of field"""
    return [
        {"$group": {
            "_id": f"${field}",
            "count": {"$sum": 1}
        }},
        {"$sort": {"_id": 1}}
    ]

def build_average_age_by_role_pipeline() -> List[Dict]:
    """Mean age per role"""
    return [
        {"$group": {
            "_id": "$role",
            "avgAge": {"$avg": "$age"}
        }},
        {"$sort": {"_id": 1}}
    ]
