
from django.contrib import messages
from django.http import HttpResponse, Http404
from django.shortcuts import render, redirect
from django.views.decorators.http import require_GET, require_POST

from medi.errors import MediError, report
from summary.services import SummaryPanel, generate_patient_summary
from visits.forms import TranslateForm
from visits.services import list_visits
from visits.storage import avatars
from visits.translations import TranslationCache
from .decorators import session_required
from .forms import ProfileForm, SignInForm, SignUpForm
from .services import load_profile, save_profile


def landing(request):
    return render(request, 'users/landing.html')


def signup(request):
    form = SignUpForm(auth_context=request.auth_context)
    if request.method == 'POST':
        form = SignUpForm(request.POST, auth_context=request.auth_context)
        if form.is_valid():
            return redirect('users:dashboard')
    return render(request, 'users/signup.html', {'form': form})


def signin(request):
    form = SignInForm(auth_context=request.auth_context)
    if request.method == 'POST':
        form = SignInForm(request.POST, auth_context=request.auth_context)
        if form.is_valid():
            return redirect('users:dashboard')
    return render(request, 'users/signin.html', {'form': form})


@require_POST
def signout(request):
    request.auth_context.sign_out()
    return redirect('users:landing')


def render_dashboard(request, summary_panel: SummaryPanel, summary_form=None, profile_form=None):
    user = request.user
    profile = load_profile(user)
    visits = list_visits(user)

    return render(request, 'users/dashboard.html', {
        'profile': profile,
        'profile_form': profile_form or ProfileForm(instance=profile),
        'visit_rows': TranslationCache(request.session).rows(visits),
        'summary': summary_panel,
        'summary_form': summary_form or TranslateForm(),
    })


@session_required
@require_GET
def dashboard(request):
    # every load asks for a fresh aggregate; any earlier translation is dropped
    panel = generate_patient_summary(request.user)
    panel.save(request.session)
    return render_dashboard(request, panel)


@session_required
@require_POST
def update_profile(request):
    profile = load_profile(request.user)
    form = ProfileForm(request.POST, request.FILES, instance=profile)
    if not form.is_valid():
        return render_dashboard(request, SummaryPanel.load(request.session), profile_form=form)

    try:
        save_profile(request.user, form.cleaned_data, form.cleaned_data.get('avatar'))
    except MediError as e:
        report(request, e)
    else:
        messages.success(request, "Profile saved.")
    return redirect('users:dashboard')


@session_required
@require_GET
def profile_avatar(request):
    profile = load_profile(request.user)
    if not profile.avatar_url:
        raise Http404("No avatar")
    try:
        content = avatars.download(profile.avatar_url)
    except MediError as e:
        report(request, e, visible=False)
        raise Http404("Avatar unavailable")
    return HttpResponse(content, content_type='application/octet-stream')
