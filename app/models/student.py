from sqlalchemy import BigInteger, Column, Integer, String
from app.core.database import Base


class Student(Base):
    __tablename__ = "students"

    # SQLite only autoincrements an INTEGER primary key
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=False)
    grade = Column(Integer, nullable=False)
    license = Column(String, nullable=True)

    def __repr__(self) -> str:
        return f"<Student id={self.id} name={self.name!r}>"
