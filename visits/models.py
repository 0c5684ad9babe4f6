import os

from django.db import models
from django.conf import settings
from django.utils import timezone


class Visit(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='visits')

    document_url = models.CharField(max_length=255)  # object path in the pdfs bucket, not a URL
    clinic_name = models.CharField(max_length=200)
    type_of_visit = models.CharField(max_length=200)
    summary = models.TextField(blank=True)  # AI written, or the fallback string
    visit_date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-visit_date']
        indexes = [
            models.Index(fields=['user', 'visit_date'], name='visit_user_date_idx'),
        ]

    @property
    def document_name(self):
        return os.path.basename(self.document_url)

    def __str__(self):
        return f"{self.clinic_name} ({self.type_of_visit}) for {self.user.email} @ {self.visit_date}"
