"""
Shared fixtures.

Every test runs against throwaway buckets under tmp_path and a fake text
generator, so nothing touches the network or the real media directory.
"""
import pytest
from django.contrib.auth.models import AnonymousUser
from django.contrib.messages.middleware import MessageMiddleware
from django.contrib.sessions.middleware import SessionMiddleware
from django.core.files.uploadedfile import SimpleUploadedFile

from medi.errors import GenerationError
from users.auth_context import AuthContext
from visits import ai


class FakeGenerator:
    """Stands in for visits.ai.generate_text and records every prompt."""

    def __init__(self):
        self.prompts = []
        self.replies = []
        self.fail = False

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if self.fail:
            raise GenerationError("generation service unavailable")
        if self.replies:
            return self.replies.pop(0)
        return "Generated text"


@pytest.fixture(autouse=True)
def generator(monkeypatch):
    fake = FakeGenerator()
    monkeypatch.setattr(ai, "generate_text", fake)
    return fake


@pytest.fixture(autouse=True)
def buckets(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path
    settings.STORAGES = {
        **settings.STORAGES,
        "pdfs": {
            "BACKEND": "django.core.files.storage.FileSystemStorage",
            "OPTIONS": {"location": tmp_path / "pdfs"},
        },
        "avatars": {
            "BACKEND": "django.core.files.storage.FileSystemStorage",
            "OPTIONS": {"location": tmp_path / "avatars"},
        },
    }
    return tmp_path


@pytest.fixture
def password():
    return "visit-notes-2024"


@pytest.fixture
def user(django_user_model, password):
    return django_user_model.objects.create_user(email="patient@example.com", password=password)


@pytest.fixture
def other_user(django_user_model, password):
    return django_user_model.objects.create_user(email="someone@example.com", password=password)


@pytest.fixture
def signed_in(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def pdf_file():
    def _make(name="CardiologyFollowUp_2024-03.pdf", content=b"%PDF-1.4 visit notes"):
        return SimpleUploadedFile(name, content, content_type="application/pdf")
    return _make


@pytest.fixture
def session_request(rf):
    """A bare request with session, messages and an auth context attached."""
    request = rf.post("/")
    SessionMiddleware(lambda r: None).process_request(request)
    request.session.save()
    MessageMiddleware(lambda r: None).process_request(request)
    request.user = AnonymousUser()
    request.auth_context = AuthContext(request)
    return request
