# routes/classes.py
from fastapi import APIRouter, HTTPException, Depends
import logging
from errors import InvalidIdentifier
from queries.student import StudentRepository
from .students import get_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/classes", tags=["classes"])

@router.get("/{class_id}/students")
async def get_class_students(class_id: str, repo: StudentRepository = Depends(get_repository)):
    try:
        students = await repo.search_students_by_class(class_id)
    except InvalidIdentifier as e:
        raise HTTPException(status_code=400, detail=str(e))
    if students is None:
        # either the class is missing or nobody is enrolled in it
        raise HTTPException(status_code=404, detail="No students found for class")
    return [s.model_dump(mode="json", by_alias=True) for s in students]
