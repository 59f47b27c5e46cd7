from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.student.student import StudentRepository


def get_student_repository(db: Session = Depends(get_db)) -> StudentRepository:
    """
    Dependency that hands each request a repository bound to its own
    database session.
    """
    return StudentRepository(db)
