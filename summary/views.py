from django.views.decorators.http import require_POST

from users.decorators import session_required
from users.views import render_dashboard
from visits.forms import TranslateForm
from .services import SummaryPanel, translate_panel


# both actions work on the summary computed by the last dashboard load and
# render the dashboard directly - a redirect would regenerate it


@session_required
@require_POST
def translate_summary(request):
    panel = SummaryPanel.load(request.session)
    form = TranslateForm(request.POST)
    if form.is_valid():
        panel = translate_panel(panel, form.cleaned_data['target_language'])
        panel.save(request.session)
    return render_dashboard(request, panel, summary_form=form)


@session_required
@require_POST
def toggle_summary(request):
    panel = SummaryPanel.load(request.session)
    panel.toggle()
    panel.save(request.session)
    return render_dashboard(request, panel)
