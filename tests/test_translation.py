import pytest
from django.contrib.messages import get_messages
from django.urls import reverse

from visits.models import Visit
from visits.translations import TranslationCache

pytestmark = pytest.mark.django_db

ORIGINAL = "Routine checkup, blood pressure normal."
SPANISH = "Revisión de rutina, presión arterial normal."


@pytest.fixture
def visit(user):
    return Visit.objects.create(user=user, document_url="abc.pdf", clinic_name="City Clinic",
                                type_of_visit="Checkup", summary=ORIGINAL)


def test_cache_toggle_only_flips_display():
    session = {}
    cache = TranslationCache(session)

    assert cache.toggle(1) is None
    cache.store(1, "Spanish", SPANISH)
    assert cache.get(1) == {"language": "Spanish", "text": SPANISH, "showing": True}

    assert cache.toggle(1) is False
    assert cache.toggle(1) is True
    assert cache.get(1)["text"] == SPANISH

    cache.discard(1)
    assert cache.get(1) is None


def test_rows_show_original_until_translated(visit):
    cache = TranslationCache({})
    [row] = cache.rows([visit])
    assert row.text == ORIGINAL
    assert row.toggle_label is None

    cache.store(visit.pk, "Spanish", SPANISH)
    [row] = cache.rows([visit])
    assert row.text == SPANISH
    assert row.toggle_label == "Show Original"

    cache.toggle(visit.pk)
    [row] = cache.rows([visit])
    assert row.text == ORIGINAL
    assert row.toggle_label == "Show Spanish"


def test_translate_and_toggle_keeps_stored_summary(signed_in, visit, generator):
    generator.replies = [SPANISH]

    signed_in.post(reverse("visits:translate", args=[visit.pk]), {"target_language": "Spanish"})

    prompt = generator.prompts[0]
    assert "Spanish" in prompt
    assert ORIGINAL in prompt

    page = signed_in.get(reverse("users:dashboard")).content.decode()
    assert SPANISH in page
    assert "Show Original" in page

    signed_in.post(reverse("visits:toggle", args=[visit.pk]))
    page = signed_in.get(reverse("users:dashboard")).content.decode()
    assert SPANISH not in page
    assert ORIGINAL in page
    assert "Show Spanish" in page

    visit.refresh_from_db()
    assert visit.summary == ORIGINAL


def test_toggle_does_not_call_generator_again(signed_in, visit, generator):
    generator.replies = [SPANISH]
    signed_in.post(reverse("visits:translate", args=[visit.pk]), {"target_language": "Spanish"})
    calls = len(generator.prompts)

    signed_in.post(reverse("visits:toggle", args=[visit.pk]))
    signed_in.post(reverse("visits:toggle", args=[visit.pk]))

    assert len(generator.prompts) == calls


def test_translate_requires_a_language(signed_in, visit, generator):
    response = signed_in.post(reverse("visits:translate", args=[visit.pk]), {"target_language": "  "})

    assert generator.prompts == []
    assert "Please enter a target language first" in [str(m) for m in get_messages(response.wsgi_request)]


def test_translation_failure_is_reported(signed_in, visit, generator):
    generator.fail = True

    response = signed_in.post(reverse("visits:translate", args=[visit.pk]), {"target_language": "Spanish"})

    assert "Failed to translate. Please try again." in [str(m) for m in get_messages(response.wsgi_request)]
    assert TranslationCache(signed_in.session).get(visit.pk) is None
