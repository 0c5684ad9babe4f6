from datetime import timedelta

import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework.test import APIClient

from visits.models import Visit

pytestmark = pytest.mark.django_db


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def token(api_client, user, password):
    response = api_client.post(reverse("users:token_obtain_pair"),
                               {"email": "Patient@Example.com", "password": password}, format="json")
    assert response.status_code == 200
    return response.data


def test_token_pair_carries_identity(token, user):
    assert token["access"]
    assert token["refresh"]
    assert token["user_id"] == user.user_id
    assert token["email"] == user.email


def test_token_rejects_bad_password(api_client, user):
    response = api_client.post(reverse("users:token_obtain_pair"),
                               {"email": user.email, "password": "nope"}, format="json")

    assert response.status_code == 401


def test_me_requires_auth(api_client):
    assert api_client.get(reverse("users:api_me")).status_code == 401


def test_me_with_bearer_token(api_client, token, user):
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token['access']}")

    response = api_client.get(reverse("users:api_me"))

    assert response.data == {"id": user.user_id, "email": user.email}


def test_visits_newest_first(api_client, token, user, other_user):
    now = timezone.now()
    Visit.objects.create(user=user, document_url="a.pdf", clinic_name="Older", type_of_visit="x",
                         visit_date=now - timedelta(days=1))
    Visit.objects.create(user=user, document_url="b.pdf", clinic_name="Newer", type_of_visit="x",
                         visit_date=now)
    Visit.objects.create(user=other_user, document_url="c.pdf", clinic_name="Theirs", type_of_visit="x")
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token['access']}")

    response = api_client.get(reverse("users:api_visits"))

    assert [v["clinic_name"] for v in response.data] == ["Newer", "Older"]
    assert response.data[0]["user_id"] == user.user_id
