"""
Visit workflows: ingestion, listing, deletion and translation.

Ingestion runs in a fixed order - summary, upload, row insert - and each
step finishes before the next starts. Uploads and row writes are separate
calls against separate stores, so a failure in the second step is followed
by a best-effort undo of the first (see `ingest_visit` and `delete_visit`).
"""
import logging
import os
import re
from typing import List

from django.db import DatabaseError
from django.utils import timezone

from medi.errors import GenerationError, StorageError, StoreError
from . import ai
from . import storage
from .models import Visit

logger = logging.getLogger(__name__)

SUMMARY_FALLBACK = "Unable to generate summary"


def derive_title(filename: str) -> str:
    """
    Readable title from a document filename.

    "CardiologyFollowUp_2024-03.pdf" -> "Cardiology Follow Up 2024 03"
    """
    stem = os.path.splitext(os.path.basename(filename or ""))[0]
    title = " ".join(re.split(r"[_-]", stem))
    title = re.sub(r"([A-Z])", r" \1", title)
    return " ".join(title.split())


def generate_visit_summary(filename: str) -> str:
    prompt = ai.VISIT_SUMMARY_PROMPT.format(title=derive_title(filename))
    try:
        return ai.generate_text(prompt)
    except GenerationError as e:
        # a missing summary never blocks the upload
        logger.warning("Summary generation failed for %s: %s", filename, e)
        return SUMMARY_FALLBACK


def _undo_upload(path: str) -> None:
    try:
        storage.documents.remove(path)
    except StorageError as e:
        logger.error("Could not remove orphaned object %s: %s", path, e)


def ingest_visit(user, uploaded_file, clinic_name: str, type_of_visit: str) -> Visit:
    summary = generate_visit_summary(uploaded_file.name)

    # StorageError propagates - nothing has been written yet
    path = storage.documents.upload(storage.random_object_name(uploaded_file.name), uploaded_file)

    try:
        visit = Visit.objects.create(
            user=user,
            document_url=path,
            clinic_name=clinic_name,
            type_of_visit=type_of_visit,
            summary=summary,
            visit_date=timezone.now(),
        )
    except DatabaseError as e:
        logger.error("Visit insert failed for %s, removing %s", user, path)
        _undo_upload(path)
        raise StoreError("Could not save the visit record", cause=e) from e

    logger.info("Ingested visit %s for %s", visit.pk, user)
    return visit


def list_visits(user) -> List[Visit]:
    try:
        return list(Visit.objects.filter(user=user).order_by("-visit_date"))
    except DatabaseError as e:
        # reads degrade to an empty history
        logger.error("Error fetching visits for %s: %s", user, e)
        return []


def open_visit_document(visit: Visit) -> bytes:
    return storage.documents.download(visit.document_url)


def delete_visit(visit: Visit) -> None:
    """
    Remove the backing object, then the row.

    If the object cannot be removed the row is left alone. If the row cannot
    be deleted afterwards, the object is put back under the same name from the
    copy read beforehand.
    """
    path = visit.document_url
    try:
        content = storage.documents.download(path)
    except StorageError:
        logger.warning("No stored copy of %s to restore from", path)
        content = None

    storage.documents.remove(path)

    try:
        visit.delete()
    except DatabaseError as e:
        logger.error("Visit delete failed for %s after removing %s", visit.pk, path)
        if content is not None:
            try:
                storage.documents.upload(path, content)
            except StorageError as undo_error:
                logger.error("Could not restore %s: %s", path, undo_error)
        raise StoreError("Could not delete the visit record", cause=e) from e


def translate_text(text: str, target_language: str) -> str:
    prompt = ai.VISIT_TRANSLATION_PROMPT.format(language=target_language, text=text)
    return ai.generate_text(prompt)
