import logging
from app.core.database import SessionLocal, create_database_tables
from app.schemas.student import StudentCreate
from app.services.student.student import StudentRepository

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    {"name": "Ada Lovelace", "phone": "555-0100", "grade": 12, "license": "D1234567"},
    {"name": "Alan Turing", "phone": "555-0101", "grade": 11, "license": None},
    {"name": "Grace Hopper", "phone": "555-0102", "grade": 9, "license": None},
]


def seed_data():
    """
    Insert a few sample students into an empty database.
    """
    create_database_tables()
    db = SessionLocal()
    try:
        repo = StudentRepository(db)
        if repo.list_all():
            logger.info("Database already contains data. Skipping seed.")
            return

        logger.info("Seeding data...")
        for payload in SAMPLE_STUDENTS:
            repo.create(StudentCreate(**payload))
        logger.info(f"Seeded {len(SAMPLE_STUDENTS)} students")
    finally:
        db.close()

if __name__ == "__main__":
    seed_data()
