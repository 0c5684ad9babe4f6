from django.urls import path
from . import views

app_name = "summary"

urlpatterns = [
    path("translate/", views.translate_summary, name="translate"),
    path("toggle/", views.toggle_summary, name="toggle"),
]
