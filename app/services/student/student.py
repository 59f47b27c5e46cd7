import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.student import Student
from app.schemas.student import StudentBase, StudentCreate

logger = logging.getLogger(__name__)

# Largest value a BIGINT primary key can hold
MAX_STUDENT_ID = 2**63 - 1


class StudentRepository:
    """
    Data access for Student records.

    Holds the request's database session. Each write commits its own
    transaction and rolls back on failure, so a reader never sees a
    half-applied create, update or delete.
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self, student_id: int) -> Optional[Student]:
        """Find a student by ID"""
        if not 0 < student_id <= MAX_STUDENT_ID:
            return None
        return self.db.get(Student, student_id)

    def get_by_name(self, name: str) -> Optional[Student]:
        """First student whose name matches, ignoring case (lowest id wins)"""
        return (
            self.db.query(Student)
            .filter(func.lower(Student.name) == name.lower())
            .order_by(Student.id)
            .first()
        )

    def list_all(self) -> List[Student]:
        return self.db.query(Student).order_by(Student.id).all()

    def get_random(self) -> Optional[Student]:
        """One student picked by the database's random() ordering"""
        return self.db.query(Student).order_by(func.random()).first()

    def create(self, data: StudentCreate) -> Student:
        if data.id is not None:
            raise ValueError("A new student must not carry an id")

        db_student = Student(
            name=data.name,
            phone=data.phone,
            grade=data.grade,
            license=data.license
        )
        self.db.add(db_student)
        self._commit()
        self.db.refresh(db_student)
        logger.info(f"Created student {db_student.id}")
        return db_student

    def update(self, student_id: int, data: StudentBase) -> Optional[Student]:
        """Overwrite all editable fields; None if the student does not exist"""
        db_student = self.get(student_id)
        if db_student is None:
            return None

        db_student.name = data.name
        db_student.phone = data.phone
        db_student.grade = data.grade
        db_student.license = data.license
        self._commit()
        self.db.refresh(db_student)
        logger.info(f"Updated student {student_id}")
        return db_student

    def delete(self, student_id: int) -> bool:
        db_student = self.get(student_id)
        if db_student is None:
            return False

        self.db.delete(db_student)
        self._commit()
        logger.info(f"Deleted student {student_id}")
        return True

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Transaction rolled back: {e}")
            self.db.rollback()
            raise
