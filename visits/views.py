from django.contrib import messages
from django.http import HttpResponse
from django.shortcuts import get_object_or_404, redirect
from django.views.decorators.http import require_GET, require_POST

from medi.errors import GenerationError, MediError, report
from summary.services import SummaryPanel
from users.decorators import session_required
from users.views import render_dashboard
from . import services
from .forms import TranslateForm, VisitUploadForm
from .models import Visit
from .translations import TranslationCache


def _own_visit(request, visit_id):
    return get_object_or_404(Visit, pk=visit_id, user_id=request.auth_context.session.pk)


# actions that leave the visit list unchanged render the dashboard in place so
# the patient summary and its translation from the last load stay as they are
def _dashboard_in_place(request):
    return render_dashboard(request, SummaryPanel.load(request.session))


@session_required
@require_POST
def upload_visit(request):
    form = VisitUploadForm(request.POST, request.FILES)
    if not form.is_valid():
        for errors in form.errors.values():
            for error in errors:
                messages.error(request, error)
        return redirect('users:dashboard')

    try:
        services.ingest_visit(
            request.user,
            form.cleaned_data['document'],
            form.cleaned_data['clinic_name'],
            form.cleaned_data['type_of_visit'],
        )
    except MediError as e:
        report(request, e)
    else:
        messages.success(request, "Visit uploaded.")
    # redirect either way - the form comes back empty
    return redirect('users:dashboard')


@session_required
@require_GET
def download_visit(request, visit_id):
    visit = _own_visit(request, visit_id)
    try:
        content = services.open_visit_document(visit)
    except MediError as e:
        report(request, e, "Error downloading file")
        return _dashboard_in_place(request)

    response = HttpResponse(content, content_type='application/pdf')
    response['Content-Disposition'] = f'attachment; filename="{visit.document_name}"'
    return response


@session_required
@require_POST
def delete_visit(request, visit_id):
    visit = _own_visit(request, visit_id)
    visit_pk = visit.pk
    try:
        services.delete_visit(visit)
    except MediError as e:
        report(request, e, "Error deleting visit")
    else:
        TranslationCache(request.session).discard(visit_pk)
        messages.success(request, "Visit deleted.")
    return redirect('users:dashboard')


@session_required
@require_POST
def translate_visit(request, visit_id):
    visit = _own_visit(request, visit_id)
    form = TranslateForm(request.POST)
    if not form.is_valid():
        messages.error(request, form.errors['target_language'][0])
        return _dashboard_in_place(request)

    language = form.cleaned_data['target_language']
    try:
        translated = services.translate_text(visit.summary, language)
    except GenerationError as e:
        report(request, e, "Failed to translate. Please try again.")
    else:
        TranslationCache(request.session).store(visit.pk, language, translated)
    return _dashboard_in_place(request)


@session_required
@require_POST
def toggle_visit_translation(request, visit_id):
    visit = _own_visit(request, visit_id)
    TranslationCache(request.session).toggle(visit.pk)
    return _dashboard_in_place(request)
