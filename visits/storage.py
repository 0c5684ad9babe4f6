"""
Object bucket access.

Buckets are the storage aliases configured in `settings.STORAGES`
("pdfs" for visit documents, "avatars" for profile images). The backend is
looked up on every call so test settings overrides take effect.
"""
import logging
import os
import uuid

from django.core.files.base import ContentFile
from django.core.files.storage import storages

from medi.errors import StorageError

logger = logging.getLogger(__name__)

DOCUMENTS = "pdfs"
AVATARS = "avatars"


def random_object_name(filename: str) -> str:
    """Random name that keeps the original file extension."""
    ext = os.path.splitext(filename or "")[1].lstrip(".").lower()
    name = uuid.uuid4().hex
    return f"{name}.{ext}" if ext else name


class Bucket:
    def __init__(self, alias: str):
        self.alias = alias

    @property
    def backend(self):
        return storages[self.alias]

    def upload(self, name: str, content) -> str:
        if isinstance(content, bytes):
            content = ContentFile(content)
        try:
            if self.backend.exists(name):
                raise StorageError(f"Object {name} already exists in {self.alias}")
            saved = self.backend.save(name, content)
        except StorageError:
            raise
        except Exception as e:
            raise StorageError(f"Upload of {name} to {self.alias} failed", cause=e) from e
        logger.info("Stored %s in bucket %s", saved, self.alias)
        return saved

    def download(self, name: str) -> bytes:
        try:
            with self.backend.open(name, "rb") as fh:
                return fh.read()
        except Exception as e:
            raise StorageError(f"Download of {name} from {self.alias} failed", cause=e) from e

    def remove(self, name: str) -> None:
        try:
            self.backend.delete(name)
        except Exception as e:
            raise StorageError(f"Removal of {name} from {self.alias} failed", cause=e) from e
        logger.info("Removed %s from bucket %s", name, self.alias)

    def exists(self, name: str) -> bool:
        try:
            return self.backend.exists(name)
        except Exception as e:
            raise StorageError(f"Lookup of {name} in {self.alias} failed", cause=e) from e

    def listdir(self) -> list:
        try:
            _, files = self.backend.listdir("")
        except FileNotFoundError:
            # nothing has been uploaded yet
            return []
        except Exception as e:
            raise StorageError(f"Listing of {self.alias} failed", cause=e) from e
        return sorted(files)


documents = Bucket(DOCUMENTS)
avatars = Bucket(AVATARS)
