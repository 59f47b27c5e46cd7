from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

MIN_GRADE = 1
MAX_GRADE = 12


class StudentBase(BaseModel):
    name: str
    phone: str
    grade: int
    license: Optional[str] = None

    @field_validator("name", "phone")
    @classmethod
    def not_blank(cls, v: str, info) -> str:
        if not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty")
        return v

    @field_validator("grade")
    @classmethod
    def grade_in_range(cls, v: int) -> int:
        if v < MIN_GRADE:
            raise ValueError(f"grade must be >= {MIN_GRADE}")
        if v > MAX_GRADE:
            raise ValueError(f"grade must be <= {MAX_GRADE}")
        return v


class StudentCreate(StudentBase):
    # Accepted only so a client-supplied id can be rejected
    id: Optional[int] = None


class StudentUpdate(StudentBase):
    # Optional; must match the path id when given
    id: Optional[int] = None


class StudentInDB(StudentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class Student(StudentInDB):
    pass
