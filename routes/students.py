# routes/students.py
from fastapi import APIRouter, HTTPException, Depends
from typing import List, Union
from pymongo.errors import BulkWriteError, DuplicateKeyError
import logging
from database import get_db, get_class_store, get_student_store
from errors import InvalidDate, InvalidIdentifier
from models.student import RawStudent
from queries.normalize import normalize_student
from queries.student import StudentRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/students", tags=["students"])

def get_repository() -> StudentRepository:
    db = get_db()
    return StudentRepository(get_student_store(db), get_class_store(db), logger=logger)

DUPLICATE_KEY_CODE = 11000

def is_duplicate_key(error: BulkWriteError) -> bool:
    write_errors = (error.details or {}).get("writeErrors", [])
    return any(e.get("code") == DUPLICATE_KEY_CODE for e in write_errors)

@router.post("/")
async def add_students(
    students: Union[RawStudent, List[RawStudent]],
    repo: StudentRepository = Depends(get_repository),
):
    raw_students = students if isinstance(students, list) else [students]
    logger.info(f"Adding {len(raw_students)} student(s)")
    try:
        normalized = [normalize_student(raw) for raw in raw_students]
        created = await repo.add_students(normalized)
    except (InvalidIdentifier, InvalidDate) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DuplicateKeyError as e:
        logger.error(f"Duplicate student id: {e}")
        raise HTTPException(status_code=400, detail="Student ID already exists")
    except BulkWriteError as e:
        if not is_duplicate_key(e):
            raise
        logger.error(f"Duplicate student id: {e.details}")
        raise HTTPException(status_code=400, detail="Student ID already exists")
    return [s.model_dump(mode="json", by_alias=True) for s in created]

@router.get("/")
async def get_students(repo: StudentRepository = Depends(get_repository)):
    students = await repo.get_students()
    return [s.model_dump(mode="json", by_alias=True) for s in students]

@router.get("/search")
async def search_students_by_name(name: str = "", repo: StudentRepository = Depends(get_repository)):
    logger.info(f"Searching students by name={name!r}")
    students = await repo.search_student_by_name(name)
    return [s.model_dump(mode="json", by_alias=True) for s in students]

@router.get("/{id}")
async def get_student(id: str, repo: StudentRepository = Depends(get_repository)):
    try:
        student = await repo.search_student_by_id(id)
    except InvalidIdentifier as e:
        raise HTTPException(status_code=400, detail=str(e))
    if student is None:
        raise HTTPException(status_code=404, detail="Student not found")
    return student.model_dump(mode="json", by_alias=True)
