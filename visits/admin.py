from django.contrib import admin
from .models import Visit


@admin.register(Visit)
class VisitAdmin(admin.ModelAdmin):
    list_display = ['clinic_name', 'type_of_visit', 'user', 'visit_date']
    list_filter = ['visit_date']
    search_fields = ['clinic_name', 'type_of_visit', 'user__email']
    readonly_fields = ['document_url', 'summary']

    def has_add_permission(self, request):
        return False  # visits only come in through the upload workflow
