# student_intake/services/storage.py
import logging
import uuid
from pathlib import Path

from fastapi import Request

logger = logging.getLogger(__name__)


class UploadStorage:
    """Public, web-served directory that holds uploaded resumes.

    ``provision()`` must run once at startup before ``save()`` is used.
    """

    def __init__(self, root: str | Path, url_prefix: str = "/uploads"):
        self.root = Path(root)
        self.url_prefix = url_prefix.rstrip("/")

    def provision(self) -> Path:
        # raises FileExistsError if the path is taken by a regular file
        self.root.mkdir(parents=True, exist_ok=True)
        logger.info("Upload directory ready at %s", self.root.resolve())
        return self.root

    def save(self, original_filename: str | None, data: bytes) -> str:
        """Write ``data`` under a generated name and return its served path."""
        suffix = Path(original_filename or "").suffix
        name = f"{uuid.uuid4().hex}{suffix}"
        (self.root / name).write_bytes(data)
        return f"{self.url_prefix}/{name}"


def get_storage(request: Request) -> UploadStorage:
    return request.app.state.storage
