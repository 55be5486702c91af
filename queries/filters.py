# queries/filters.py
"""MongoDB filter documents for the student queries."""
import re
from typing import Any, Dict, Iterable, List
from bson import ObjectId

NAME_FIELDS = ("firstName", "lastName")


def split_name(name: str) -> List[str]:
    # Blank input becomes one empty token, which matches every student
    return name.split() or [""]


def name_token_clause(token: str) -> Dict[str, Any]:
    """Case-insensitive substring match of one token against either name field."""
    pattern = re.escape(token)
    return {"$or": [{field: {"$regex": pattern, "$options": "i"}} for field in NAME_FIELDS]}


def build_name_query(name: str) -> Dict[str, Any]:
    tokens = split_name(name)
    if len(tokens) == 1:
        return name_token_clause(tokens[0])
    # every token has to match the same student, each on either field
    return {"$and": [name_token_clause(token) for token in tokens]}


def build_members_query(ids: Iterable[ObjectId]) -> Dict[str, Any]:
    return {"_id": {"$in": list(ids)}}
