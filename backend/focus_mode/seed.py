"""Seed a student row so the client has someone to track.

Usage:
    python -m focus_mode.seed --name "Ada Lovelace" --create-tables
"""
import argparse
import logging

from .database import create_tables, get_db_session
from .models import Student, StudentStatus

logger = logging.getLogger(__name__)


def seed_student(db, name: str) -> Student:
    """Insert a student in normal status and return it."""
    student = Student(name=name, status=StudentStatus.normal)
    db.add(student)
    db.flush()
    logger.info(f"Seeded student {student.id} ({name})")
    return student


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create a student for the Focus Mode service")
    parser.add_argument("--name", required=True, help="display name of the student")
    parser.add_argument("--create-tables", action="store_true", help="create missing tables first")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    if args.create_tables:
        create_tables()

    with get_db_session() as db:
        student = seed_student(db, args.name)
        student_id = student.id
    print(student_id)
    return student_id


if __name__ == "__main__":
    main()
