# queries/student.py
"""Student reads and writes against the Students and Classes collections."""
import logging
from typing import Any, List, Optional, Sequence, Union
from database import DocumentStore
from models.classroom import Classroom
from models.student import Student
from queries.filters import build_members_query, build_name_query
from utils.object_id import convert_to_object_id

module_logger = logging.getLogger(__name__)


class StudentRepository:
    """Create and search students.

    Store errors are not caught: whatever the driver raises on a read or a
    write reaches the caller unchanged. "Not found" is ``None`` or an empty
    list, never an exception.
    """

    def __init__(
        self,
        students: DocumentStore,
        classes: DocumentStore,
        logger: Optional[logging.Logger] = None,
    ):
        self.students = students
        self.classes = classes
        self.logger = logger or module_logger

    async def add_students(self, students: Union[Student, Sequence[Student]]) -> List[Student]:
        """Insert one student or a batch of students in a single store call.

        Not idempotent: adding the same batch twice inserts it twice unless the
        store rejects the duplicate ids.
        """
        batch = [students] if isinstance(students, Student) else list(students)
        if not batch:
            return []
        created = await self.students.create([s.model_dump(by_alias=True) for s in batch])
        self.logger.info(f"Students added to database: {len(created)}")
        return [Student.model_validate(doc) for doc in created]

    async def get_students(self) -> List[Student]:
        docs = await self.students.find({})
        return [Student.model_validate(doc) for doc in docs]

    async def search_student_by_id(self, id: Any) -> Optional[Student]:
        # malformed ids fail here, before the store is asked
        student_id = convert_to_object_id(id, "_id")
        doc = await self.students.find_by_id(student_id)
        if doc is None:
            return None
        return Student.model_validate(doc)

    async def search_student_by_name(self, name: str) -> List[Student]:
        """Partial, case-insensitive match of every word in ``name`` against first or last name."""
        docs = await self.students.find(build_name_query(name))
        return [Student.model_validate(doc) for doc in docs]

    async def search_students_by_class(self, class_id: Any) -> Optional[List[Student]]:
        """Students listed on a class.

        Returns None both when the class does not exist and when it has no
        students; callers cannot tell the two apart.
        """
        doc = await self.classes.find_by_id(convert_to_object_id(class_id, "classId"))
        if doc is None:
            return None
        classroom = Classroom.model_validate(doc)
        if not classroom.students:
            return None
        docs = await self.students.find(build_members_query(classroom.students))
        return [Student.model_validate(d) for d in docs]
