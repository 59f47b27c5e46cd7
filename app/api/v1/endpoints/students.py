from fastapi import APIRouter, Depends, Path, Request, Response, status
from typing import List
from app.api.deps import get_student_repository
from app.core.exceptions import (
    BadRequestException,
    IdentityConflictException,
    NotFoundException,
)
from app.services.student.student import StudentRepository
from app.schemas.student import Student, StudentCreate, StudentUpdate

router = APIRouter()

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"description": "Not found"}}
BAD_REQUEST_RESPONSE = {status.HTTP_400_BAD_REQUEST: {"description": "Bad request"}}


def _self_link(request: Request, response: Response) -> None:
    response.headers["Link"] = f'<{request.url}>; rel="self"'


def _blank_name_error() -> BadRequestException:
    return BadRequestException(
        "Input validation failed",
        details={"path.name": "name cannot be empty"}
    )


# Static paths are registered before /{student_id} so they are matched first.

@router.get(
    "",
    response_model=List[Student],
    tags=["Read"],
    summary="Get all students",
)
def get_students(
    request: Request,
    response: Response,
    repo: StudentRepository = Depends(get_student_repository)
):
    """
    Returns a list of all students (empty if there are none).
    """
    _self_link(request, response)
    return repo.list_all()


@router.get(
    "/random",
    response_model=Student,
    tags=["Read"],
    summary="Get a random student",
    responses=NOT_FOUND_RESPONSE,
)
def get_random_student(
    request: Request,
    response: Response,
    repo: StudentRepository = Depends(get_student_repository)
):
    """
    Returns a random student if any exist.
    """
    student = repo.get_random()
    if student is None:
        raise NotFoundException("No students found")
    _self_link(request, response)
    return student


@router.get("/search", include_in_schema=False)
def search_student_without_name():
    # "/search/" with an empty name is redirected here
    raise _blank_name_error()


@router.get(
    "/search/{name}",
    response_model=Student,
    tags=["Read"],
    summary="Get a student by name",
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
def search_student(
    request: Request,
    response: Response,
    name: str,
    repo: StudentRepository = Depends(get_student_repository)
):
    """
    Returns the first student whose name matches, ignoring case.
    """
    if not name.strip():
        raise _blank_name_error()

    student = repo.get_by_name(name)
    if student is None:
        raise NotFoundException("Student not found")
    _self_link(request, response)
    return student


@router.get(
    "/{student_id}",
    response_model=Student,
    tags=["Read"],
    summary="Get a student by id",
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
def get_student(
    request: Request,
    response: Response,
    student_id: int = Path(ge=1),
    repo: StudentRepository = Depends(get_student_repository)
):
    """
    Returns the student if found.
    """
    student = repo.get(student_id)
    if student is None:
        raise NotFoundException("Student not found")
    _self_link(request, response)
    return student


@router.post(
    "",
    response_model=Student,
    status_code=status.HTTP_201_CREATED,
    tags=["Create"],
    summary="Create a new student",
    responses=BAD_REQUEST_RESPONSE,
)
def create_student(
    request: Request,
    response: Response,
    student: StudentCreate,
    repo: StudentRepository = Depends(get_student_repository)
):
    """
    Accepts JSON without id; the id is assigned by the database.

    - **name**: required, not blank
    - **phone**: required, not blank
    - **grade**: required, 1 to 12
    - **license**: optional
    """
    if student.id is not None:
        raise IdentityConflictException("Don't include an id when creating a student.")

    db_student = repo.create(student)
    response.headers["Location"] = str(
        request.url_for("get_student", student_id=str(db_student.id))
    )
    return db_student


@router.put(
    "/{student_id}",
    response_model=Student,
    tags=["Update"],
    summary="Update a student by id",
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
def update_student(
    request: Request,
    response: Response,
    student: StudentUpdate,
    student_id: int = Path(ge=1),
    repo: StudentRepository = Depends(get_student_repository)
):
    """
    Updates the student identified by the URL id. The id cannot be changed.
    """
    if student.id is not None and student.id != student_id:
        raise IdentityConflictException("Path id and body id must match.")

    updated_student = repo.update(student_id, student)
    if updated_student is None:
        raise NotFoundException("Student not found")
    _self_link(request, response)
    return updated_student


@router.delete(
    "/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["Delete"],
    summary="Delete a student by id",
    responses=NOT_FOUND_RESPONSE,
)
def delete_student(
    student_id: int = Path(ge=1),
    repo: StudentRepository = Depends(get_student_repository)
):
    """
    Deletes the student with the given id.
    """
    if not repo.delete(student_id):
        raise NotFoundException("Student not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
