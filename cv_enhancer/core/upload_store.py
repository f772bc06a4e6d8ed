"""
Local-disk upload store.

Files are saved under an opaque id (uuid4 hex) with their original extension;
the id is what clients use to ask for extraction later.
"""

import logging
import re
import uuid
from pathlib import Path
from typing import Optional

from cv_enhancer.core.errors import UploadNotFoundError, UploadTooLargeError

logger = logging.getLogger(__name__)

FILE_ID_RE = re.compile(r"^[0-9a-f]{32}$")


class LocalUploadStore:
    def __init__(self, root: str, max_bytes: Optional[int] = None):
        self.root = Path(root)
        self.max_bytes = max_bytes

    def _ensure_root(self) -> None:
        if not self.root.exists():
            self.root.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created uploads directory: {self.root.resolve()}")

    def _find(self, file_id: str) -> Optional[Path]:
        if not FILE_ID_RE.match(file_id or ""):
            return None
        if not self.root.exists():
            return None
        for path in self.root.glob(f"{file_id}*"):
            if path.is_file():
                return path
        return None

    def save(self, content: bytes, filename: str = "") -> str:
        """Store bytes and return the new file id."""
        if self.max_bytes is not None and len(content) > self.max_bytes:
            raise UploadTooLargeError(f"File is {len(content)} bytes; the limit is {self.max_bytes}")
        self._ensure_root()
        file_id = uuid.uuid4().hex
        suffix = Path(filename).suffix.lower() if filename else ""
        path = self.root / f"{file_id}{suffix}"
        path.write_bytes(content)
        logger.info(f"Stored upload {file_id} ({len(content)} bytes)")
        return file_id

    def load(self, file_id: str) -> bytes:
        path = self._find(file_id)
        if path is None:
            raise UploadNotFoundError(f"File with ID {file_id} not found")
        return path.read_bytes()

    def delete(self, file_id: str) -> bool:
        path = self._find(file_id)
        if path is None:
            return False
        path.unlink()
        return True
