# models/student.py
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import List, Optional, Union
from utils.object_id import PyObjectId

class Enrollment(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, extra="allow")

    classId: PyObjectId
    enrolledTime: datetime

class Student(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True, extra="allow")

    id: PyObjectId = Field(alias="_id")
    firstName: str
    lastName: str
    dob: Optional[datetime] = None
    classEnrolled: List[Enrollment] = []  # insertion order, duplicates kept

class RawEnrollment(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, extra="allow")

    classId: Union[str, PyObjectId]
    enrolledTime: Union[str, datetime]

class RawStudent(BaseModel):
    """Student record as it arrives from callers: ids and dates are usually plain strings."""
    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True, extra="allow")

    id: Union[str, PyObjectId] = Field(alias="_id")
    firstName: str
    lastName: str
    dob: Optional[Union[str, datetime]] = None
    classEnrolled: List[RawEnrollment] = []
