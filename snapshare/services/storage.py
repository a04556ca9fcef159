"""Process-local stand-in for object storage.

Uploads live in a Django ``InMemoryStorage`` and disappear with the process.
``public_url`` returns its input unchanged: there is no CDN in front of it.
"""

import logging
import posixpath
from typing import Optional

from django.core.files.base import ContentFile, File
from django.core.files.storage import InMemoryStorage

from snapshare.errors import NotFound, ValidationError
from snapshare.utils.uuid import next_id

logger = logging.getLogger(__name__)


class StorageAdapter:
    """Turn uploaded blobs into paths that resolve back to their bytes."""

    def __init__(self, upload_dir: str = "uploads", storage: Optional[InMemoryStorage] = None) -> None:
        self.upload_dir = upload_dir.strip("/")
        self.storage = storage or InMemoryStorage()

    def _content_for(self, blob) -> File:
        if isinstance(blob, File):
            return blob
        if isinstance(blob, (bytes, bytearray)):
            return ContentFile(bytes(blob))
        if hasattr(blob, "read"):
            return File(blob, name=getattr(blob, "name", None))
        raise ValidationError("Upload must be bytes or a file object", field="blob")

    def _target_name(self, name: Optional[str]) -> str:
        extension = posixpath.splitext(name or "")[1].lower()
        return posixpath.join(self.upload_dir, f"{next_id()}{extension}")

    def upload(self, blob, name: Optional[str] = None) -> str:
        """Store the blob's bytes and return the path that refers to them."""
        content = self._content_for(blob)
        path = self.storage.save(self._target_name(name or content.name), content)
        logger.debug("Stored upload at %s", path)
        return path

    def open(self, path: str) -> bytes:
        """Return the bytes stored at ``path``."""
        if not path or not self.storage.exists(path):
            raise NotFound("Upload", path)
        # Closing the node would close the stored buffer itself.
        return self.storage.open(path, "rb").read()

    def public_url(self, path: str) -> str:
        """Identity: stored paths are already what a client renders."""
        return path
