# utils/object_id.py
from typing import Annotated, Any, Optional
from bson import ObjectId
from bson.errors import InvalidId
from pydantic import PlainSerializer, WithJsonSchema
from errors import InvalidIdentifier


def convert_to_object_id(value: Any, field: Optional[str] = None) -> ObjectId:
    """Convert an external identifier into a MongoDB ObjectId.

    Only ObjectId instances and their 24 character hex form are accepted. The
    12 byte form bson also understands is rejected, since raw records never
    carry binary ids.
    """
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str):
        raise InvalidIdentifier(value, field)
    try:
        return ObjectId(value)
    except InvalidId:
        raise InvalidIdentifier(value, field)


# ObjectId field type for pydantic models: kept native for BSON, hex string in JSON
PyObjectId = Annotated[
    ObjectId,
    PlainSerializer(str, return_type=str, when_used="json"),
    WithJsonSchema({"type": "string", "pattern": "^[0-9a-fA-F]{24}$"}),
]
