# models/classroom.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from utils.object_id import PyObjectId

class Classroom(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True, extra="allow")

    id: PyObjectId = Field(alias="_id")
    name: Optional[str] = None
    students: Optional[List[PyObjectId]] = None  # membership is owned here, not on Student
