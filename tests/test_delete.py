import pytest
from django.contrib.messages import get_messages
from django.db import DatabaseError
from django.urls import reverse

from medi.errors import StorageError, StoreError
from visits import services, storage
from visits.models import Visit

pytestmark = pytest.mark.django_db


@pytest.fixture
def visit(user, pdf_file):
    return services.ingest_visit(user, pdf_file(), "City Clinic", "Checkup")


def test_delete_removes_row_and_document(signed_in, visit):
    response = signed_in.post(reverse("visits:delete", args=[visit.pk]))

    assert response.status_code == 302
    assert not Visit.objects.filter(pk=visit.pk).exists()
    assert not storage.documents.exists(visit.document_url)


def test_delete_removes_object_before_row(visit, monkeypatch):
    calls = []
    real_remove = storage.documents.remove
    real_delete = Visit.delete

    def tracking_remove(name):
        calls.append("object")
        real_remove(name)

    def tracking_delete(self, *args, **kwargs):
        calls.append("row")
        return real_delete(self, *args, **kwargs)

    monkeypatch.setattr(storage.documents, "remove", tracking_remove)
    monkeypatch.setattr(Visit, "delete", tracking_delete)

    services.delete_visit(visit)

    assert calls == ["object", "row"]


def test_row_survives_when_object_removal_fails(signed_in, visit, monkeypatch):
    def broken_remove(name):
        raise StorageError("bucket unavailable")
    monkeypatch.setattr(storage.documents, "remove", broken_remove)

    response = signed_in.post(reverse("visits:delete", args=[visit.pk]))

    assert Visit.objects.filter(pk=visit.pk).exists()
    assert "Error deleting visit" in [str(m) for m in get_messages(response.wsgi_request)]


def test_object_is_restored_when_row_delete_fails(visit, monkeypatch):
    def broken_delete(self, *args, **kwargs):
        raise DatabaseError("database is locked")
    monkeypatch.setattr(Visit, "delete", broken_delete)

    with pytest.raises(StoreError):
        services.delete_visit(visit)

    assert Visit.objects.filter(pk=visit.pk).exists()
    assert storage.documents.download(visit.document_url) == b"%PDF-1.4 visit notes"


def test_row_without_object_can_still_be_deleted(visit):
    storage.documents.remove(visit.document_url)

    services.delete_visit(visit)

    assert not Visit.objects.filter(pk=visit.pk).exists()


def test_cannot_delete_someone_elses_visit(client, other_user, visit):
    client.force_login(other_user)

    response = client.post(reverse("visits:delete", args=[visit.pk]))

    assert response.status_code == 404
    assert Visit.objects.filter(pk=visit.pk).exists()


def test_open_visit_document_returns_stored_bytes(visit):
    assert services.open_visit_document(visit) == b"%PDF-1.4 visit notes"


def test_download_returns_document(signed_in, visit):
    response = signed_in.get(reverse("visits:download", args=[visit.pk]))

    assert response.status_code == 200
    assert response.content == b"%PDF-1.4 visit notes"
    assert response["Content-Disposition"] == f'attachment; filename="{visit.document_url}"'


def test_download_of_missing_document_shows_dashboard_with_message(signed_in, visit, generator):
    storage.documents.remove(visit.document_url)
    calls = len(generator.prompts)

    response = signed_in.get(reverse("visits:download", args=[visit.pk]))

    assert response.status_code == 200
    assert b"Error downloading file" in response.content
    assert len(generator.prompts) == calls
