#!/usr/bin/env python3
"""
Fake data generator for the academic records database.

Creates one branch per department, classes A/B/C under every branch and a
batch of random students in each class. Branches that already exist are
reused so the script can be run again against the same database.
"""
import argparse
import random
import string
import uuid

from records.records_db import open_database
from records.services.academic.branch_service import BranchService
from records.services.academic.class_service import ClassService
from records.services.academic.student_service import StudentService
from records.services.admin.index_service import IndexService
from records.logging_logs.log_config import get_logger

logger = get_logger("seed_data")

BRANCH_SUBJECTS = {
    "CSE": ["Data Structures", "Operating Systems", "Computer Networks", "DBMS"],
    "ISE": ["Software Engineering", "Information Security", "Web Technologies", "DBMS"],
    "ECE": ["Signals and Systems", "Analog Circuits", "Digital Electronics", "VLSI"],
    "MECH": ["Thermodynamics", "Fluid Mechanics", "Machine Design", "Manufacturing"],
    "CIVIL": ["Structural Analysis", "Surveying", "Geotechnical Engineering", "Hydraulics"],
    "EEE": ["Power Systems", "Electrical Machines", "Control Systems", "Power Electronics"]
}

CLASSES = ["A", "B", "C"]

FIRST_NAMES = ["Aarav", "Diya", "Rohan", "Ananya", "Vikram", "Isha", "Karthik", "Meera",
               "Arjun", "Sneha", "Rahul", "Priya", "Nikhil", "Kavya", "Siddharth", "Pooja"]
LAST_NAMES = ["Sharma", "Rao", "Iyer", "Patel", "Reddy", "Nair", "Gupta", "Shetty",
              "Kulkarni", "Menon", "Hegde", "Joshi"]

class DataGenerator:
    """Generate random student data"""

    @staticmethod
    def generate_username():
        first = random.choice(FIRST_NAMES)
        last = random.choice(LAST_NAMES)
        return f"{first}_{last}{random.randint(1, 99)}"

    @staticmethod
    def generate_email(username):
        return f"{username.lower()}.{uuid.uuid4().hex[:8]}@nmitMock.ac"

    @staticmethod
    def generate_phone():
        return random.choice("6789") + "".join(random.choice(string.digits) for _ in range(9))

    @staticmethod
    def generate_cgpa():
        return round(random.uniform(3.7, 10), 2)

def generate_students(student_service, class_id, count):
    for _ in range(count):
        username = DataGenerator.generate_username()
        student_service.create_student(
            name=username,
            age=random.randint(18, 25),
            email=DataGenerator.generate_email(username),
            phone=DataGenerator.generate_phone(),
            class_id=class_id,
            role="Student",
            electives=[],
            cgpa=DataGenerator.generate_cgpa()
        )

def generate_branches(db, students_per_class):
    branch_service = BranchService(db)
    class_service = ClassService(db)
    student_service = StudentService(db)

    for branch_name, subjects in BRANCH_SUBJECTS.items():
        branch = branch_service.find_branch_by_name(branch_name)
        if branch is None:
            branch = branch_service.create_branch(branch_name, subjects)
        else:
            logger.info(f"Branch {branch_name} already exists, reusing it")

        for class_name in CLASSES:
            new_class = class_service.create_class(class_name, branch["_id"])
            generate_students(student_service, new_class["_id"], students_per_class)

    logger.info("Fake data generated")

def main():
    parser = argparse.ArgumentParser(description="Seed the records database with fake data")
    parser.add_argument("--students-per-class", type=int, default=60)
    parser.add_argument("--seed", type=int, default=None, help="random seed for repeatable data")
    args = parser.parse_args()

    if args.seed is not None:
        random.seed(args.seed)

    with open_database() as db:
        IndexService(db).ensure_indexes()
        generate_branches(db, args.students_per_class)

if __name__ == "__main__":
    main()
