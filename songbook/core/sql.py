# ============================================================================
# FILE: songbook/core/sql.py
# ============================================================================
"""
Helper for building selective UPDATE statements.

The calling service uses it to make the SET clause of an UPDATE on a single
row. Only the fields present in the change set are written.

Example:
    >>> update = sql_for_partial_update({"firstName": "Aliya"}, {"firstName": "first_name"})
    >>> update.assignments
    ['"first_name"=$1', '"img_url"=$2']
    >>> update.values
    ['Aliya', 'https://i.pinimg.com/...']
"""
import re
from pydantic import BaseModel
from typing import Any, Dict, List, Mapping, Tuple
from songbook.config import settings
from songbook.core.exceptions import InvalidInputError

# Never written through a raw column update; hashing goes through core.security
SENSITIVE_FIELDS = ("password",)

IMG_URL_FIELDS = ("imgUrl", "img_url")
IMG_URL_COLUMN = "img_url"

_PLACEHOLDER = re.compile(r"\$(\d+)")


class PartialUpdate(BaseModel):
    """Ordered column assignments with their positionally bound values"""
    assignments: List[str] = []
    values: List[Any] = []
    
    @property
    def set_clause(self) -> str:
        return ", ".join(self.assignments)
    
    def as_bind_params(self) -> Tuple[str, Dict[str, Any]]:
        """
        Rewrite ``$n`` placeholders as ``:pn`` named binds.
        Returns the SET clause and its parameter dict, ready for ``sqlalchemy.text``.
        """
        clause = _PLACEHOLDER.sub(r":p\1", self.set_clause)
        params = {f"p{idx}": value for idx, value in enumerate(self.values, start=1)}
        return clause, params


def sql_for_partial_update(data_to_update: Mapping[str, Any], js_to_sql: Mapping[str, str]) -> PartialUpdate:
    """
    Build the SET clause pieces for a partial update.

    :param data_to_update: {field1: newVal, field2: newVal, ...}
    :param js_to_sql: maps data fields to database column names,
        like {"firstName": "first_name", "age": "age"}
    :return: PartialUpdate with ordered assignments and values
    :raises InvalidInputError: if there is nothing to update
    """
    if not data_to_update:
        raise InvalidInputError("No data")
    
    keys = [key for key in data_to_update if key not in SENSITIVE_FIELDS]
    
    assignments = [
        f'"{js_to_sql.get(key) or key}"=${idx}'
        for idx, key in enumerate(keys, start=1)
    ]
    values = [data_to_update[key] for key in keys]
    
    # Image not part of the change set: reset it to the placeholder
    if not any(key in data_to_update for key in IMG_URL_FIELDS):
        assignments.append(f'"{IMG_URL_COLUMN}"=${len(keys) + 1}')
        values.append(settings.DEFAULT_USER_IMG_URL)
    
    return PartialUpdate(assignments=assignments, values=values)
