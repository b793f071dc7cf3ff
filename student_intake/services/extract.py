# student_intake/services/extract.py
"""Pull typed values out of a parsed multipart form."""
import json
import logging
from typing import List, Optional, TypeVar

from starlette.datastructures import FormData, UploadFile

from student_intake.core.errors import BadRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")


def first_value(form: FormData, name: str, default: T) -> str | T:
    """First string value submitted for ``name``.

    Zero occurrences -> ``default``; one -> that value; several -> the first.
    File parts under a scalar name are ignored.
    """
    for value in form.getlist(name):
        if isinstance(value, str):
            return value
    return default


def first_upload(form: FormData, name: str) -> Optional[UploadFile]:
    for value in form.getlist(name):
        if isinstance(value, UploadFile):
            return value
    return None


def _parse_label_list(raw: str) -> List[str]:
    value = json.loads(raw)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError("expected a JSON array of strings")
    return value


def decode_label_list(form: FormData, name: str, strict: bool = False) -> List[str]:
    """Decode a JSON-encoded array of strings.

    A missing field is always ``[]``. An unparseable one is ``[]`` too unless
    ``strict`` is set, in which case the request is rejected.
    """
    raw = first_value(form, name, None)
    if raw is None:
        return []
    try:
        return _parse_label_list(raw)
    except ValueError:
        # json.JSONDecodeError is a ValueError
        if strict:
            raise BadRequest(f"Invalid value for {name}")
        logger.warning("Ignoring malformed list field %s", name)
        return []
